"""
Completion command implementation.

``gvs completion bash`` prints a bash completion script. The script calls
back into ``gvs completion __complete CUR PREV``, which prints candidate
words for the word being completed.
"""

import logging
import shutil
import sys
from pathlib import Path
from typing import List

from gvs.cli.parser import SUBCOMMANDS
from gvs.cli.utils import get_version_manager, print_error
from gvs.core.exceptions import GvsError

logger = logging.getLogger(__name__)

BASH_COMPLETION_SCRIPT = """\
#compdef gvs
_gvs_completions() {
    local cur prev
    cur="${COMP_WORDS[COMP_CWORD]}"
    prev="${COMP_WORDS[COMP_CWORD-1]}"

    local words
    # Ask gvs for the candidate words given the current and previous words.
    words=$(@@GVS_EXECUTABLE@@ completion __complete "${cur}" "${prev}")

    COMPREPLY=($(compgen -W "${words}" -- "${cur}"))
}

complete -F _gvs_completions gvs
"""


def _executable() -> str:
    """Best guess at the command that launched gvs."""
    argv0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if argv0 is not None and argv0.name == "gvs" and argv0.exists():
        return str(argv0.resolve())
    return shutil.which("gvs") or "gvs"


def bash_script(executable: str) -> str:
    return BASH_COMPLETION_SCRIPT.replace("@@GVS_EXECUTABLE@@", executable)


def candidates(args, current: str, previous: str) -> List[str]:
    """
    Compute completion candidates.

    Args:
        args: Parsed arguments (for ``--config``)
        current: Word being completed
        previous: Word before it

    Returns:
        Matching words; empty when nothing applies
    """
    if previous in ("use", "remove"):
        try:
            installed = get_version_manager(args).list_installed()
        except GvsError as e:
            logger.debug(f"No completions: {e}")
            return []
        words = [str(v) for v in installed]
    elif previous == "gvs":
        words = SUBCOMMANDS
    else:
        return []

    return [w for w in words if w.startswith(current)]


def run(args) -> int:
    """
    Run the completion command.

    Args:
        args: Parsed command-line arguments with:
            - shell: 'bash' or '__complete'
            - words: [CUR, PREV] for '__complete'

    Returns:
        Exit code (0 for success)
    """
    if args.shell == "__complete":
        words = list(args.words) + ["", ""]
        for word in candidates(args, words[0], words[1]):
            print(word)
        return 0

    if args.shell == "bash":
        print(bash_script(_executable()), end="")
        return 0

    print_error("Usage: gvs completion [bash]")
    return 1
