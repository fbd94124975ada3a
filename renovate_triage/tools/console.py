"""Interactive terminal prompts."""

from typing import Callable, Optional


YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Console:
    """
    Yes/no and free-text prompts on the terminal.

    Both prompts return None when input ends (EOF), leaving it to the
    caller to decide whether that is fatal.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output_fn

    def _read(self, text: str) -> Optional[str]:
        try:
            return self._input(text)
        except EOFError:
            return None

    def confirm(self, question: str, default: bool = False) -> Optional[bool]:
        """
        Ask a yes/no question.

        Args:
            question: Question to show
            default: Answer used when the operator just presses enter

        Returns:
            True/False, or None if input ended
        """
        choices = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._read(f"{question} {choices}: ")
            if answer is None:
                return None
            answer = answer.strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self._output(f"Error: invalid value: {answer}")

    def prompt(
        self,
        text: str,
        default: Optional[str] = None,
        show_default: bool = True
    ) -> Optional[str]:
        """
        Ask for a line of text.

        Args:
            text: Prompt to show
            default: Value used when the operator just presses enter
            show_default: Show the default next to the prompt

        Returns:
            Entered text (or default), or None if input ended
        """
        suffix = f" [{default}]" if default is not None and show_default else ""
        while True:
            answer = self._read(f"{text}{suffix}: ")
            if answer is None:
                return None
            if answer:
                return answer
            if default is not None:
                return default
            self._output("Error: a value is required")
