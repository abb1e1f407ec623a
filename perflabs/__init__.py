"""Reference workloads for performance experiments, each with an input generator and a solution."""

__version__ = "0.1.0"