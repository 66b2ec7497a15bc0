"""
Package marker for source code under `src`.
It groups the payload, database, and page-object examples under a stable import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
