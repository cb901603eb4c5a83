"""
podpool.pods
~~~~~~~~~~~~

The pod pool an allocation run works on.  Each Pod is one unit of bookable
capacity holding its allocations in assignment order; a PodPool maps pod
numbers 1..N to pods and always iterates in pod-number order.

Basic usage::

    from podpool.pods import init_pods

    pool = init_pods(14)
    pool[1].allocations      # → ()
    [p.number for p in pool] # → [1, 2, ..., 14]
"""

from podpool.pods.pods import Pod, PodPool, init_pods, to_datetime64

__all__ = ["Pod", "PodPool", "init_pods", "to_datetime64"]
