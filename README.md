# wbi

`wbi` is a Python library with the building blocks an administrator needs
when preparing a Linux server for a data science workbench: it finds
installed R and Python versions, orders and filters version numbers, checks
that a Connect server answers, and validates the arguments and flags of the
`scan`, `activate`, `config` and `verify` operations.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `wbi.versions`

Dotted version numbers.

- `parse_version(text)` returns a `Version` (at least three numeric segments,
  plus an optional prerelease and metadata); a malformed string raises
  `VersionError`. A leading `v` is accepted.
- `parse_versions(texts)` and `format_versions(versions)` convert lists both
  ways.
- `sort_versions_desc(versions)` orders newest first.
- `remove_elements(original, to_remove)` drops unwanted strings.
- `remove_newer_versions`, `remove_older_versions` and
  `remove_specific_versions` drop versions relative to a limit within the same
  major.minor line, or one exact major.minor.patch.

```python
from wbi.versions import parse_versions, sort_versions_desc, format_versions

format_versions(sort_versions_desc(parse_versions(["4.1.3", "4.2.2", "3.6.3"])))
# ['4.2.2', '4.1.3', '3.6.3']
```

### `wbi.rlang`

- `scan_for_r_versions(paths=None, root_dirs=None)` lists R binaries. By
  default it looks at `/usr/bin/R`, `/usr/local/bin/R`, `/usr/lib/R` and
  under `/opt/R/<version>/bin/R` and `/usr/local/lib/R/<version>/bin/R`, then
  adds the `R` found on `PATH` if it is not listed yet. Installations under
  the first root directory come first, newest version first.
- `sort_opt_r_version_paths(paths)` orders `<root>/<version>/bin/R` paths by
  version, newest first.
- `remove_system_r_paths(paths)` drops paths under `/usr/`.
- `r_symlinks_exist(bin_dir="/usr/local/bin")` reports whether `R` or
  `Rscript` already exists there.
- `retrieve_valid_r_versions()` downloads the published list of installable
  R versions, drops `next` and `devel`, and returns the rest newest first.
- `validate_r_versions(versions)` raises `RLangError` with a message such as
  `version 1.6.1 is not a valid R version` for any version not in that list.

### `wbi.pylang`

- `scan_for_python_versions(paths=None, root_dirs=None)` does for Python what
  `scan_for_r_versions` does for R, looking in the matching `python`
  locations (including `/opt/python/<version>/bin/python`) and for `python3`
  on `PATH`.
- `sort_opt_python_version_paths(paths)` orders by version, newest first.
- `remove_python_from_path(path)` / `remove_python_from_paths(paths)` remove
  the last `/python` from a path, giving its `bin` directory.
- `python_profile_exists(profile_path="/etc/profile.d/wbi_python.sh")`
  reports whether the profile script exists.

### `wbi.jupyter`

- `remove_string(items, value)` drops the first occurrence of a value.
- `remove_non_opt_python(paths)` keeps only paths under `/opt`.
- `jupyter_path_for(python_path)` gives the `jupyter` executable beside a
  Python binary.

### `wbi.connect`

- `clean_connect_url(url)` removes one trailing slash.
- `verify_connect_url(url)` requests `<url>/__ping__` with a 30 second
  timeout and returns the cleaned URL; it raises `ConnectError` when the
  server cannot be reached or does not answer with status 200.

```python
from wbi.connect import verify_connect_url

verify_connect_url("https://connect.example.com/")
# 'https://connect.example.com'
```

### `wbi.scan`

- `ScanOptions().validate(args)` accepts exactly one argument, `r` or
  `python`, and returns it.
- `run_scan(language)` scans for that language, prints the paths one per
  line and returns them.

### Option validation

`ActivateOptions` (`wbi.activate`), `ConfigOptions` (`wbi.configure`) and
`VerifyOptions` (`wbi.verify`) are dataclasses holding the flags of those
operations. Their `validate(args)` method checks that exactly one argument is
given and that the flags fit it, returns the argument, and raises
`ValueError` with an explanatory message otherwise.

```python
from wbi.configure import ConfigOptions

ConfigOptions(url="https://packages.example.com/cran/latest", source="cran").validate(["repo"])
# 'repo'
ConfigOptions().validate(["ssl"])
# ValueError: the cert-path flag is required for ssl
```

Every module logs through the standard `logging` module.

## What this package does not do

- It installs no command-line program; its functions are called from Python.
- It does not download or install R, Python, Quarto, drivers or workbench
  packages, and does not create symlinks or change `PATH`.
- It does not look up which Python versions are available for installation.
- It does not activate a licence or write configuration files; the option
  classes only check the arguments.
- It does not detect the operating system.