"""Bash completion script for the latest command and its source sub-commands."""

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

BASH_COMPLETION_FILENAME = "latest-completion.sh"

ROOT_FLAGS = (
    "--config", "--num", "-n", "--gen-autocomplete",
    "--workers", "--ordered", "--verbose", "-v", "--help", "-h",
)
SOURCE_FLAGS = ("--num", "-n", "--open", "-o", "--config", "--verbose", "-v", "--help", "-h")

_TEMPLATE = """\
# bash completion for {prog}
# source this file, e.g. `. {filename}`

_{func}()
{{
    local cur sub
    COMPREPLY=()
    cur="${{COMP_WORDS[COMP_CWORD]}}"
    sub=""
    for word in "${{COMP_WORDS[@]:1:COMP_CWORD-1}}"; do
        case "$word" in
            {case_commands}) sub="$word"; break ;;
        esac
    done

    if [[ -n "$sub" ]]; then
        COMPREPLY=( $(compgen -W "{source_flags}" -- "$cur") )
    elif [[ "$cur" == -* ]]; then
        COMPREPLY=( $(compgen -W "{root_flags}" -- "$cur") )
    else
        COMPREPLY=( $(compgen -W "{commands}" -- "$cur") )
    fi
    return 0
}}

complete -F _{func} {prog}
"""


def build_completion_script(prog: str, commands: Iterable[str]) -> str:
    commands = list(commands)
    func = "".join(c if c.isalnum() else "_" for c in prog)
    return _TEMPLATE.format(
        prog=prog,
        filename=BASH_COMPLETION_FILENAME,
        func=func,
        # an empty case pattern is a bash syntax error
        case_commands="|".join(commands) or "__no_sources__",
        commands=" ".join(commands),
        root_flags=" ".join(ROOT_FLAGS),
        source_flags=" ".join(SOURCE_FLAGS),
    )


def write_completion_file(
    prog: str, commands: Iterable[str], path: Path = Path(BASH_COMPLETION_FILENAME)
) -> Path:
    """Write the bash completion script and return its path."""
    path.write_text(build_completion_script(prog, commands), encoding="utf-8")
    logger.info("Wrote bash completion script to %s", path)
    return path
