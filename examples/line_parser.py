"""Incremental line parser driven by its caller.

The parser body is written as straight-line code; the caller feeds it one
chunk of text per resume. Every complete line comes back as a ``str`` yield,
and a ``None`` yield asks for the next chunk. An empty chunk signals end of
input, and the parser completes with the number of lines it produced.

Run with: uv run python examples/line_parser.py
"""

from collections.abc import Iterable

from resumable import Complete, Coroutine, Handle, Yield


async def split_lines(handle: Handle[str | None, str | None], chunk: str | None) -> int:
    buffer = ""
    produced = 0
    while chunk:
        buffer += chunk
        while "\n" in buffer:
            line, buffer = buffer.split("\n", 1)
            produced += 1
            await handle.yield_(line)
        chunk = await handle.yield_(None)
    if buffer:
        produced += 1
        await handle.yield_(buffer)
    return produced


def collect_lines(chunks: Iterable[str]) -> tuple[list[str], int]:
    """Feed ``chunks`` to the parser, then end of input; return lines and count."""
    pending = iter(chunks)
    parser = Coroutine(split_lines)
    lines: list[str] = []
    state = parser.resume_with(next(pending, ""))
    while True:
        match state:
            case Yield(None):
                state = parser.resume_with(next(pending, ""))
            case Yield(line):
                lines.append(line)
                state = parser.resume_with(None)
            case Complete(count):
                return lines, count


def main() -> None:
    lines, count = collect_lines(["alpha\nbe", "ta\n\ngamma", "\ndelta"])
    for line in lines:
        print(f"line: {line!r}")
    print(f"{count} lines")


if __name__ == "__main__":
    main()
