"""Extract dictionary lookup candidates from the text around a cursor."""


class Tokenizer:
    """Find the word under a cursor position in plain text."""

    # Punctuation that can be part of a dictionary lemma (e.g. "'hood", "a.m.")
    WORD_PUNCTUATION = "_-'./"

    def _is_word_char(self, char: str) -> bool:
        return char.isalnum() or char in self.WORD_PUNCTUATION

    def word_at(self, line: str, character: int) -> str | None:
        """
        Return the lower-cased text from the start of the word under the
        cursor to the end of the phrase that follows it.

        Spaces after the cursor are kept so multi-word lemmas such as
        "living thing" can be matched. Returns None when the cursor is not
        on a word character.
        """
        if not 0 <= character < len(line) or not self._is_word_char(line[character]):
            return None

        start = character
        while start > 0 and self._is_word_char(line[start - 1]):
            start -= 1

        end = character + 1
        while end < len(line) and (self._is_word_char(line[end]) or line[end] == " "):
            end += 1

        return line[start:end].lower()

    def words_at(self, text: str, line: int, character: int) -> list[str]:
        """
        Return lookup candidates for a cursor position, shortest first.

        Each successive word after the cursor extends the candidate with an
        underscore ("a", "a_runner", "a_runner_runs"); each candidate also
        yields variants with leading or trailing punctuation removed.

        Args:
            text: Document content
            line: Zero-based line number
            character: Zero-based character offset within the line
        """
        lines = text.splitlines()
        if not 0 <= line < len(lines):
            return []

        phrase = self.word_at(lines[line], character)
        if phrase is None:
            return []

        candidates: list[str] = []
        current = ""
        for word in phrase.split():
            current = f"{current}_{word}" if current else word
            candidates.append(current)
            for char in self.WORD_PUNCTUATION:
                if current.startswith(char):
                    stripped = current[1:]
                    candidates.append(stripped)
                    if stripped.endswith(char):
                        candidates.append(stripped[:-1])
                if current.endswith(char):
                    candidates.append(current[:-1])

        ordered = sorted((c for c in candidates if c), key=lambda c: (len(c), c))
        return list(dict.fromkeys(ordered))
