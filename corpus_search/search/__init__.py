"""
Search service for neural (k-NN) search over the OpenSearch collections.

This module provides:
1. The collection table mapping each collection to its index, vector field and formatter
2. Neural query construction
3. Hit post-processing (display fields and id suffixes) and JSON encoding
"""
