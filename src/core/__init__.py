"""Core domain package for blockscope.

Core contains the chunking and coalescing resolution rules without any
provider plugin, config file, or terminal code, keeping them portable.
"""
