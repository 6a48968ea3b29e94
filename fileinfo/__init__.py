"""fileinfo - Unified result model for executable file introspection"""
__version__ = "1.0.0"
