"""Classic algorithms and data structures.

Modules: sorting, searching, linked_list, binary_tree, array_queue,
recursion, techniques, graphs and dynamic.
"""

__version__ = "0.1.0"