"""
Package marker for source code under `src`.
It groups the quote board web layer, the quote store backends, and shared helpers under one import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
