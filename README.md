# promptparts

Small helpers for building an informative shell prompt. Each module works out
one piece of context: where you are, which toolchain is active, what your git
repository is in the middle of, and so on. The results are plain strings, or
`None` when there is nothing to show, ready to lay out however your prompt
likes.

## Installation

```
pip install promptparts
```

Requires Python 3.11 or later. Depends on `pyyaml` and `regex`.

## Modules

| Module | What it gives you |
|---|---|
| `promptparts.directory` | `contract_path`, `truncate`, `to_fish_style`: shorten a path to `~` or a repository name, keep the last few components, abbreviate leading directories |
| `promptparts.cmd_duration` | `render_time`: seconds as `"2h48m30s"` |
| `promptparts.clock` | `format_time`, `create_offset_time_string` (raises `InvalidOffsetError` for offsets outside -24..24 hours) |
| `promptparts.git_branch` | `truncate_branch_name`, `get_graphemes`, `graphemes_len`: grapheme-aware branch truncation |
| `promptparts.git_state` | `RepositoryState`, `get_state_description`, `describe_rebase`: a label such as `"rebase"` with `StateProgress` read from `.git` |
| `promptparts.java` | `parse_jre_version`, `format_java_version`, `get_java_version` |
| `promptparts.ruby` | `format_ruby_version`, `get_ruby_version` |
| `promptparts.pyversion` | `format_python_version`, `get_python_version`, `get_pyenv_version`, `get_python_virtual_env` |
| `promptparts.rust` | `get_rust_version` and its parts: `rustup` override lookup, `rust-toolchain` files, `format_rustc_version` |
| `promptparts.dotnet` | `estimate_dotnet_version`, `get_local_dotnet_files`, `get_pinned_sdk_version`, `get_latest_sdk_from_cli` |
| `promptparts.package` | `get_package_version`: the version from `Cargo.toml`, `package.json` or a Poetry `pyproject.toml` |
| `promptparts.kubernetes` | `find_kube_context`, `get_kube_context`: current context and namespace from a kubeconfig |
| `promptparts.aws` | `get_aws_profile_and_region`, `get_aws_region`, `format_aws_segment` |
| `promptparts.hostname` | `get_hostname`, `trim_hostname` |
| `promptparts.memory_usage` | `format_kib`, `format_usage`, `percent_sign_for_shell` |
| `promptparts.env_var` | `get_env_value`: a variable's value with a fallback |
| `promptparts.segment` | `Segment`: a value with an optional ANSI SGR style |
| `promptparts.utils` | `read_file` |

## Examples

```python
from datetime import datetime

from promptparts.directory import contract_path, truncate
from promptparts.cmd_duration import render_time
from promptparts.clock import create_offset_time_string
from promptparts.git_branch import truncate_branch_name
from promptparts.package import extract_cargo_version
from promptparts.memory_usage import format_usage

contract_path("/home/me/projects/rocket", "/home/me", "~")
# '~/projects/rocket'

truncate("~/projects/engines/booster/rocket", 3)
# 'engines/booster/rocket'

render_time(90)
# '1m30s'

create_offset_time_string(datetime(2014, 7, 8, 15, 36, 47), "+5", "%r")
# '08:36:47 PM'

truncate_branch_name("feature/long-name", 7, "…")
# 'feature…'

extract_cargo_version('[package]\nname = "demo"\nversion = "0.1.0"\n')
# 'v0.1.0'

format_usage(512, 1024, True, "%")
# '50%'
```

Functions that look something up return `None` when the information is not
available: no tool on `PATH`, no config file, no matching entry. Version
lookups that need an external tool (`java`, `ruby`, `python`, `pyenv`,
`rustup`, `rustc`, `dotnet`) run it as a subprocess.

## What it does not do

- There is no command-line program and nothing that assembles a complete
  prompt; you combine the pieces yourself.
- It has no configuration file, styling scheme or ordering of parts.
- It does not detect the git repository, branch or status itself: you pass
  the branch name to `truncate_branch_name` and a `RepositoryState` to
  `get_state_description`.
- It does not measure memory; `memory_usage` only formats figures you supply.
- It has no Go version detection.

## Running the tests

```
pip install -e ".[test]"
pytest
```