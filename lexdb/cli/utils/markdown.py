"""Markdown rendering of lookup results for hover and definition views."""

from lexdb.services.wordnet import Definition, PartOfSpeech, Sense


def split_gloss(gloss: str) -> tuple[str, list[str]]:
    """
    Split a gloss into its definition and quoted usage examples.

    >>> split_gloss('a member of the genus Canis; "the dog barked all night"')
    ('a member of the genus Canis', ['the dog barked all night'])
    """
    definition_parts = []
    examples = []
    for part in gloss.split(";"):
        part = part.strip()
        if not part:
            continue
        if part.startswith('"'):
            examples.append(part.strip('"').strip())
        else:
            definition_parts.append(part)
    return "; ".join(definition_parts), examples


def _display(word: str) -> str:
    return word.replace("_", " ")


def _numbered(index: int, gloss: str, prefix: str = "") -> str:
    definition, examples = split_gloss(gloss)
    line = f"{index}. {prefix}{definition}."
    if examples:
        line += f" e.g. {'; '.join(examples)}."
    return line


def render_hover(senses: list[Sense]) -> str:
    """Render senses grouped by word and part of speech, with synonyms."""
    groups: dict[tuple[str, PartOfSpeech], list[Sense]] = {}
    for sense in senses:
        groups.setdefault((sense.lemma.text, sense.lemma.pos), []).append(sense)

    blocks = []
    for (word, pos), group in groups.items():
        lines = [f"**{_display(word)}** _{pos.label}_"]
        lines.extend(_numbered(i, sense.definition) for i, sense in enumerate(group, start=1))
        blocks.append("\n".join(lines))

        synonyms = sorted({s for sense in group for s in sense.synonyms if s != word})
        if synonyms:
            blocks.append(f"**synonyms**: {', '.join(_display(s) for s in synonyms)}")

    return "\n\n".join(blocks)


def render_definitions(definitions: list[Definition]) -> str:
    """Render the full definition view: one heading per word, relations per sense."""
    sections: dict[str, list[Definition]] = {}
    for definition in definitions:
        sections.setdefault(definition.sense.lemma.text, []).append(definition)

    blocks = []
    for word, group in sections.items():
        lines = [f"# {_display(word)}", ""]
        for i, definition in enumerate(group, start=1):
            sense = definition.sense
            lines.append(_numbered(i, sense.definition, f"_{sense.lemma.pos.label}_ "))
            if sense.synonyms:
                lines.append(f"**synonyms**: {', '.join(_display(s) for s in sense.synonyms)}")
            for relation, related in definition.relations.items():
                words = dict.fromkeys(_display(r.lemma.text) for r in related)
                lines.append(f"**{relation.value}**: {', '.join(words)}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)
