"""Shell hook scripts that feed executed commands to `emplace catch`.

Each hook runs after every successful command, does a cheap substring
check for any known command word and only then starts emplace.
"""

import shlex

from emplace.managers import all_command_words

SUPPORTED_SHELLS: tuple[str, ...] = ("bash", "zsh", "fish")

_BASH_INIT = r"""
emplace_postexec_invoke_exec () {
    [ $? -eq 0 ] || return

    local hist
    hist=$(HISTTIMEFORMAT= history 1)
    @CHECKS@ || return

    local this_command
    this_command=$(echo "$hist" | sed -e "s/^[ ]*[0-9]*[ ]*//")
    @EMPLACE@ catch "$this_command"
}
PROMPT_COMMAND="emplace_postexec_invoke_exec;$PROMPT_COMMAND"
"""

_ZSH_INIT = r"""
emplace_precmd() {
    [ $? -eq 0 ] || return

    local hist
    hist=$(history -1)
    @CHECKS@ || return

    local this_command
    this_command=$(echo "$hist" | sed -e "s/^[ ]*[0-9]*[ ]*//")
    @EMPLACE@ catch "$this_command"
}
# Nested shells must not register the hook twice
if [[ ${precmd_functions[(ie)emplace_precmd]} -gt ${#precmd_functions} ]]; then
    precmd_functions+=(emplace_precmd)
fi
"""

_FISH_INIT = r"""
function emplace_postexec --on-event fish_postexec
    test $status -eq 0; or return

    set -l this_command $argv[1]
    @CHECKS@; or return

    @EMPLACE@ catch "$this_command"
end
"""


def _checks(shell: str) -> str:
    """Build the substring pre-filter for every known command word."""
    words = all_command_words()
    if shell == "fish":
        return "; or ".join(
            f"string match -q -- {shlex.quote(f'*{word}*')} \"$this_command\"" for word in words
        )
    return " || ".join(f'[[ $hist == *"{word}"* ]]' for word in words)


def init_script(shell: str, executable: str) -> str:
    """Render the hook script for a shell.

    Args:
        shell: Shell name ('bash', 'zsh' or 'fish').
        executable: Path or name of the emplace executable.

    Returns:
        Script text to be evaluated by the shell's startup file.

    Raises:
        ValueError: If the shell is not supported.
    """
    templates = {"bash": _BASH_INIT, "zsh": _ZSH_INIT, "fish": _FISH_INIT}
    if shell not in templates:
        msg = f"Shell {shell!r} is not supported, choose one of: {', '.join(SUPPORTED_SHELLS)}"
        raise ValueError(msg)

    return (
        templates[shell]
        .replace("@EMPLACE@", shlex.quote(executable))
        .replace("@CHECKS@", _checks(shell))
        .lstrip("\n")
    )
