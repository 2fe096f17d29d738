"""
Singly Linked List Package

An in-memory singly linked list of integers together with the classic
list algorithms:
    - reverse in place
    - middle element via two-pointer traversal
    - cycle detection via tortoise-and-hare

ARCHITECTURAL GUARANTEE:
------------------------
The core (node, linked_list, algorithms) never logs, never prints on
its own and never raises for routine failures. Every failure is a
boolean outcome or a sentinel reported at the call site.

Rendering, serialization, analysis and diagrams live in outer layers
and consume a list read-only.
"""

__version__ = "0.1.0"
