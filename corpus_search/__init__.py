"""
Semantic search gateway for the document collections hosted in OpenSearch.

This package provides:
1. One POST endpoint per collection running a neural (k-NN) query
2. Per-collection display formatting of the returned hits
3. Traceability suffixing of every string field with the hit id
"""

__version__ = "1.0.0"
