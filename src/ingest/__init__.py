"""Raw input acquisition.

This module turns tool arguments (base64 text, hex text, file paths)
into immutable raw input blobs for the decode pipeline.
"""
