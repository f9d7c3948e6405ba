"""Fund trade tracker with cached historical close prices."""

__version__ = "0.1.0"
