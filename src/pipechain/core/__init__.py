# topmark:header:start
#
#   project      : PipeChain
#   file         : __init__.py
#   file_relpath : src/pipechain/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""Core helpers shared across PipeChain (no pipeline or CLI dependencies)."""
