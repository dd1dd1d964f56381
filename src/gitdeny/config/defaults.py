"""Starter .gitdeny.toml and rule-file templates written by ``gitdeny init``."""

DEFAULT_TOML = """\
# gitdeny configuration
version = "1.0"

[scan]
rules = "git-deny-patterns.json"   # relative to the repository
all = false                        # true = check every tracked file, not just staged ones
# max_workers = 8                  # default: one worker per file

[output]
format = "terminal"                # terminal | json
show_summary = true
"""

# Same shape as git-deny-patterns.json. Regex patterns are matched literally
# except for \\A, \\z and \\. (see gitdeny.rules.compiler).
DEFAULT_RULES = [
    {
        "part": "extension",
        "type": "match",
        "pattern": "pem",
        "caption": "Potential cryptographic private key",
    },
    {
        "part": "extension",
        "type": "match",
        "pattern": "key",
        "caption": "Potential cryptographic private key",
    },
    {
        "part": "extension",
        "type": "match",
        "pattern": "p12",
        "caption": "PKCS#12 certificate bundle",
    },
    {
        "part": "extension",
        "type": "match",
        "pattern": "pfx",
        "caption": "PKCS#12 certificate bundle",
    },
    {
        "part": "extension",
        "type": "match",
        "pattern": "kdbx",
        "caption": "KeePass password database",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": "id_rsa",
        "caption": "Private SSH key",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": "id_dsa",
        "caption": "Private SSH key",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": "id_ecdsa",
        "caption": "Private SSH key",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": "id_ed25519",
        "caption": "Private SSH key",
    },
    {
        "part": "filename",
        "type": "regex",
        "pattern": "\\A\\.env",
        "caption": "Environment configuration file",
        "description": "Environment files usually hold API keys and database passwords.",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".htpasswd",
        "caption": "Apache htpasswd file",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".netrc",
        "caption": "Configuration file for auto-login process",
        "description": "Can contain usernames and passwords.",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".pgpass",
        "caption": "PostgreSQL password file",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".npmrc",
        "caption": "NPM configuration file",
        "description": "Can contain credentials for NPM registries.",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".pypirc",
        "caption": "PyPI configuration file",
        "description": "Can contain credentials for PyPI.",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": "terraform.tfstate",
        "caption": "Terraform state file",
        "description": "State files can contain plaintext secrets.",
    },
    {
        "part": "path",
        "type": "regex",
        "pattern": ".aws/credentials\\z",
        "caption": "AWS CLI credentials file",
    },
]
