"""
hakoniwa: a discrete-tick world simulation kernel

A small "box garden" in which things happen on their own: the host describes
what exists and the rules of the world, then watches it unfold.

Core concepts:
- Time advances one unit-tick at a time, grouped into days and years
- Everything that exists (people, machines, plants) is an object at a point
- Objects cause events; events are forgotten when their lifetime ends
- Generators read the world and say what happens next: new events,
  new objects, and objects that disappear
"""

__version__ = "0.1.0"
