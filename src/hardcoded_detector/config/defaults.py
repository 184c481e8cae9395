"""Starter .hardcoded-detector.toml template."""

DEFAULT_TOML = """\
# hardcoded-detector configuration
version = "1.0"

[scan]
min_severity = "medium"   # low | medium | high | critical
# include = ["**/*.py", "**/*.js"]          # empty = every text file
exclude = [".git/**", "node_modules/**", "dist/**", "build/**", "coverage/**"]
stream_large_files = false                 # stream files above 10 MiB instead of skipping

[patterns]
# custom_patterns = "detector-patterns.yaml"
# disabled = ["jwt_token"]
# exclude_categories = ["payment"]

[entropy]
filter = false            # drop low-entropy matches of generic patterns

[workers]
enabled = true
# count = 4               # default: number of CPUs
executor = "process"      # process | thread

[baseline]
enabled = false
path = ".hardcoded-detector-baseline.json"

[output]
format = "terminal"       # terminal | json | sarif | csv | junit
"""
