import logging


logger = logging.getLogger("ansiterm")

LINE_FEEDS = ("\n", "\r")


class CharPrompt:
    """The state of one single-keystroke prompt.

    Holds the accepted characters, the optional default and the list of
    choices as displayed. Creating a CharPrompt validates the arguments and
    raises ValueError for invalid ones. The given list is not modified.
    """

    def __init__(
        self,
        accepted_characters,
        prompt=None,
        default_choice_index=None,
        display_accepted_characters=True,
        bolden=None,
    ):
        accepted_characters = list(accepted_characters or [])
        if not accepted_characters:
            raise ValueError("accepted_characters must not be empty.")
        for c in accepted_characters:
            if not isinstance(c, str) or len(c) != 1:
                raise ValueError(f"Accepted characters must be single characters, got {c!r}.")
        if prompt is not None and not prompt:
            raise ValueError("prompt must be None or a non-empty string.")
        if default_choice_index is not None:
            if not 0 <= default_choice_index < len(accepted_characters):
                raise ValueError(
                    f"default_choice_index {default_choice_index} is out of range "
                    f"for {len(accepted_characters)} accepted characters."
                )

        self.accepted_characters = accepted_characters
        self.prompt = prompt
        self.default_choice_index = default_choice_index
        self.display_accepted_characters = display_accepted_characters

        # The default is shown in bold, and Enter selects it
        self.display_list = list(accepted_characters)
        if default_choice_index is not None and bolden is not None:
            i = default_choice_index
            self.display_list[i] = bolden(self.display_list[i])

    @property
    def default_choice(self):
        if self.default_choice_index is None:
            return None
        return self.accepted_characters[self.default_choice_index]

    def write_prompt(self, status):
        """Write the prompt line, if there is a prompt."""
        if self.prompt is None:
            return
        status.print_status(self.prompt, emphasis=True, newline=False)
        if self.display_accepted_characters:
            status.print_status(f" [{'|'.join(self.display_list)}]", newline=False)
        status.print_status(": ", emphasis=True, newline=False)

    def accepts(self, choice):
        """Whether the given keystroke ends the prompt."""
        if not choice or len(choice) > 1:
            return False
        if choice in self.accepted_characters:
            return True
        return self.default_choice_index is not None and choice in LINE_FEEDS

    def resolve(self, choice):
        """Get the character that an accepted keystroke stands for."""
        if self.default_choice_index is not None and choice in LINE_FEEDS:
            logger.debug("line feed selects the default choice")
            return self.default_choice
        return choice
