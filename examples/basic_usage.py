#!/usr/bin/env python3
"""Basic usage example for fa1codec.

This example demonstrates:
1. Defining programs and alarms
2. Encoding them into an FA1 image
3. Inspecting the raw entry bytes
4. Decoding the image back into records
"""

from __future__ import annotations

from fa1codec import (
    AfterTimer,
    AlarmRecord,
    PowerLevel,
    ProgramRecord,
    TimerStart,
    decode,
    encode,
    find_checksum_mismatches,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("fa1codec Basic Usage Example")
    print("=" * 60)
    print()

    # Create records
    print("1. Creating programs and alarms...")
    programs = [
        ProgramRecord(
            name="Brisket",
            temperature=250,
            power_level=PowerLevel.SLOW,
            timer="14:00:00",
            timer_start=TimerStart.AT_SET_TEMPERATURE,
            after_timer=AfterTimer.KEEP_WARM,
        ),
        ProgramRecord(name="Pizza", temperature=482, power_level=PowerLevel.MAX),
    ]
    alarms = [AlarmRecord(name="Probe done", temperature=203)]
    for program in programs:
        print(f"   {program.name}: {program.temperature}, timer {program.timer}")
    print()

    # Encode
    print("2. Encoding...")
    image = encode(programs, alarms)
    print(f"   Image size: {len(image)} bytes")
    print()

    # Raw bytes of the second program
    print("3. Raw entry for 'Pizza' (block 0, slot 1)...")
    entry = image[36:72]
    print(f"   name:        {entry[:26]!r}")
    print(f"   temperature: byte30={entry[30]} control=0x{entry[31]:02X}")
    print(f"   timer:       {entry[32]}:{entry[33]}:{entry[34]}")
    print(f"   checksum:    0x{entry[35]:02X}")
    print()

    # Decode
    print("4. Decoding...")
    decoded_programs, decoded_alarms = decode(image)
    assert decoded_programs == programs
    assert decoded_alarms == alarms
    print(f"   {len(decoded_programs)} programs, {len(decoded_alarms)} alarms")
    print(f"   Checksum mismatches: {len(find_checksum_mismatches(image))}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
