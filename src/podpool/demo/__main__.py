from podpool.demo import main

print(main())
