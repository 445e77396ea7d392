"""R1CS file reading and writing, circuit structure helpers, field bounds and SMT-LIB builders."""

__version__ = "1.0.0"