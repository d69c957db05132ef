# topmark:header:start
#
#   project      : PipeChain
#   file         : __init__.py
#   file_relpath : src/pipechain/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PipeChain contributors
#
# topmark:header:end

"""PipeChain configuration package.

- [`pipechain.config.logging`][pipechain.config.logging]: TRACE-aware logging setup
- [`pipechain.config.settings`][pipechain.config.settings]: pipeline settings loaded from TOML
- [`pipechain.config.io`][pipechain.config.io]: TOML read/render helpers (tomlkit)
- [`pipechain.config.keys`][pipechain.config.keys]: the TOML schema keys

Submodules are imported explicitly; `pipechain.config.settings` depends on the
pipeline package, which itself logs through `pipechain.config.logging`.
"""
