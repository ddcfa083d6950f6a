"""Sort integers with two stacks and the push_swap instruction set, and check instruction sequences."""

__version__ = "1.0.0"