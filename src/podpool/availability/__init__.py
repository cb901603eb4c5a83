"""
podpool.availability
~~~~~~~~~~~~~~~~~~~~

Which pods can take a session of ``duration`` minutes starting at ``start``,
given a changeover ``buffer`` that must separate it from every session
already on the pod.  A pod qualifies when, for each existing allocation ``a``::

    a.end + buffer <= start   or   start + duration + buffer <= a.start

Intervals are half-open, so with ``buffer=0`` a session may begin exactly
when the previous one ends.

Basic usage::

    from podpool.pods import init_pods
    from podpool.availability import available_pods

    pool = init_pods(4)
    free = available_pods(pool, start, duration=30, buffer=5)
    [p.number for p in free]    # ascending pod numbers

``availability_mask`` returns the underlying boolean array (pod-number order).
"""

from podpool.availability.availability import availability_mask, available_pods

__all__ = ["availability_mask", "available_pods"]
