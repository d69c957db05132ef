# topmark:header:start
#
#   project      : PipeChain
#   file         : __init__.py
#   file_relpath : src/pipechain/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain CLI subcommands."""
