"""Shell integration snippets.

Each snippet installs the shell's command-not-found hook as a generic
dispatcher: an unknown word is handed to `pintas run --internal`, which exits
126 when no alias matches so the hook can report the usual error. Aliases are
resolved at call time, so the snippet never needs regenerating.
"""

import shlex

from pintas.errors import UnsupportedShellError

NOT_FOUND_STATUS = 126

BASH = """\
# pintas shell integration for bash
# Add the following line to your ~/.bashrc:
#   eval "$({program} init bash)"

command_not_found_handle() {{
  {program} run --internal -- "$@"
  local exit_code=$?
  if [ $exit_code -eq {not_found} ]; then
    printf 'bash: %s: command not found\\n' "$1" >&2
    return 127
  fi
  return $exit_code
}}
"""

ZSH = """\
# pintas shell integration for zsh
# Add the following line to your ~/.zshrc:
#   eval "$({program} init zsh)"

command_not_found_handler() {{
  {program} run --internal -- "$@"
  local exit_code=$?
  if [ $exit_code -eq {not_found} ]; then
    printf 'zsh: command not found: %s\\n' "$1" >&2
    return 127
  fi
  return $exit_code
}}
"""

FISH = """\
# pintas shell integration for fish
# Add the following line to your ~/.config/fish/config.fish:
#   {program} init fish | source

function fish_command_not_found
    {program} run --internal -- $argv
    set -l status_code $status
    if test $status_code -eq {not_found}
        printf 'fish: Unknown command: %s\\n' $argv[1] >&2
        return 127
    end
    return $status_code
end
"""

TEMPLATES = {
    "bash": BASH,
    "zsh": ZSH,
    "fish": FISH,
}


def supported_shells() -> list[str]:
    return sorted(TEMPLATES)


def emit(shell: str, program: str = "pintas") -> str:
    """Return the integration snippet for shell, calling back into program."""
    template = TEMPLATES.get(shell)
    if template is None:
        raise UnsupportedShellError(shell)
    return template.format(program=shlex.quote(program), not_found=NOT_FOUND_STATUS)
