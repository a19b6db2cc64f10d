"""Running average with an explicit stop value.

Run with: uv run python examples/running_average.py
"""

from resumable import Coroutine, Handle


async def averager(handle: Handle[float, float | None], first: float | None) -> float:
    total = 0.0
    count = 0
    sample = first
    while sample is not None:
        total += sample
        count += 1
        sample = await handle.yield_(total / count)
    return total / count if count else 0.0


def main() -> None:
    with Coroutine(averager, name="averager") as co:
        for sample in (10, 20, 60):
            print(f"after {sample}: {co.resume_with(sample).value}")
        print(f"final: {co.resume_with(None).value}")


if __name__ == "__main__":
    main()
