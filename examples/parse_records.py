"""
Parsing records with Either: validation, partitioning and debugging.

Run: python examples/parse_records.py
"""
from eitherpy import Either, Left, Right, partition_map, traverse, configure


def parse_age(raw: str) -> Either[str, int]:
    if not raw.strip().isdigit():
        return Left(f"not a number: {raw!r}")
    return Right(int(raw)).filter(lambda n: n < 150, lambda: f"implausible age: {raw}")


def main():
    configure(level="DEBUG")
    rows = ["34", "x", "12", "999", "61"]

    # Split good and bad rows, keeping their order
    errors, ages = partition_map(rows, parse_age)
    print("ages:", ages)
    print("errors:", errors)

    # All-or-nothing: the first bad row wins
    everything = traverse(rows, parse_age)
    print("traverse:", everything)

    # Chain and inspect
    total = (
        traverse(["1", "2", "3"], parse_age)
        .map(sum)
        .debug("total")
        .get_or_else(lambda: 0)
    )
    print("total:", total)


if __name__ == "__main__":
    main()
