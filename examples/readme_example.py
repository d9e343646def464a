import copy

from recordkit import (
    IdPolicy,
    PrimitiveRecord,
    Record,
    configure_from_settings,
    max_record,
    sort_records,
)


def main() -> None:
    configure_from_settings()

    sid = Record.build(10, "Sid", 10, 120)
    anon = Record.default()
    print(f"{sid} > {anon}: {sid > anon}")

    # Same id, different payload: still the same entity
    print(f"Record.build(0, 'Sid', 10, 120) == default(): {Record.build(0, 'Sid', 10, 120) == anon}")

    twin = sid.duplicate()
    kept = sid.duplicate(IdPolicy.PRESERVE)
    print(f"reset duplicate: {twin} (equal: {twin == sid})")
    print(f"preserved duplicate: {kept} (equal: {kept == sid})")

    # Refresh payload without touching identity
    anon.duplicate_from(Record.build(99, "Ada", 36, 165))
    print(f"refreshed: {anon}")

    people = [Record.build(3, "C", 1, 1), Record.build(1, "A", 1, 1), Record.build(2, "B", 1, 1)]
    print(f"sorted ids: {[p.id for p in sort_records(people)]}")
    print(f"larger id wins max: {max_record(people[0], people[1]).name}")

    something = PrimitiveRecord.default()
    other = copy.copy(something)
    print(f"{other} == {something}: {other == something}, shares name: {other.name is something.name}")


if __name__ == "__main__":
    main()
