"""End-to-end integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from fa1codec import (
    AfterTimer,
    PowerLevel,
    TimerStart,
    decode,
    dump_records,
    encode,
    find_checksum_mismatches,
    load_records,
    read_image,
    write_image,
)

# Records as the cooking form hands them over
FORM_RECORDS = {
    "programs": [
        {
            "name": "Texas Brisket",
            "temperature": 250,
            "powerLevel": "Slow",
            "timer": "14:00:00",
            "timerStart": "At Set Temperature",
            "afterTimer": "Keep Warm",
        },
        {
            "name": "Neapolitan Pizza",
            "temperature": 482,
            "powerLevel": "Max",
            "timer": "00:01:30",
            "timerStart": "At Prompt",
            "afterTimer": "Stop Cooking",
        },
        {
            "name": "Sear",
            "temperature": 400,
            "powerLevel": "Fast",
            "timer": "off",
            "timerStart": "At Beginning",
            "afterTimer": "Continue Cooking",
        },
    ],
    "alarms": [
        {"name": "Brisket Probe", "temperature": 203},
        {"name": "Grill Too Hot", "temperature": 450},
    ],
}


def test_form_to_file_to_form(tmp_path: Path) -> None:
    """Form records survive the trip through an FA1 file and back."""
    contents = load_records(json.dumps(FORM_RECORDS))

    path = write_image(tmp_path, contents.programs, contents.alarms)
    restored = read_image(path)

    assert json.loads(dump_records(restored)) == FORM_RECORDS


def test_hand_built_image() -> None:
    """An image assembled byte by byte decodes to the expected records."""
    image = bytearray(b"\xff" * 8192)

    # Program in block 1, slot 2: "Wings", 375 degrees, Medium, 00:45:00,
    # At Set Temperature, Repeat Timer
    program = bytearray(36)
    program[:5] = b"Wings"
    program[30] = 375 - 255
    program[31] = 0x80 | (3 << 5) | (1 << 2) | 1
    program[32:35] = bytes([0, 45, 0])
    program[35] = sum(program[:35]) % 256
    image[256 + 2 * 36 : 256 + 3 * 36] = program

    # Alarm in block 20, slot 0
    alarm = bytearray(36)
    alarm[:4] = b"Cold"
    alarm[30] = 40
    alarm[35] = sum(alarm[:35]) % 256
    image[20 * 256 : 20 * 256 + 36] = alarm

    programs, alarms = decode(bytes(image))

    assert len(programs) == 1
    wings = programs[0]
    assert wings.name == "Wings"
    assert wings.temperature == 375
    assert wings.power_level is PowerLevel.MEDIUM
    assert wings.timer == "00:45:00"
    assert wings.timer_start is TimerStart.AT_SET_TEMPERATURE
    assert wings.after_timer is AfterTimer.REPEAT_TIMER

    assert [(a.name, a.temperature) for a in alarms] == [("Cold", 40)]
    assert find_checksum_mismatches(bytes(image)) == []

    # Re-encoding compacts the records into the first slots
    compact = encode(programs, alarms)
    assert compact[:36] == bytes(program)
    assert compact[4096 : 4096 + 36] == bytes(alarm)


def test_full_image() -> None:
    """Both sections can be filled to capacity at once."""
    contents = load_records(
        json.dumps(
            {
                "programs": [{"name": f"Program {i}", "temperature": i * 4} for i in range(112)],
                "alarms": [{"name": f"Alarm {i}", "temperature": 482 - i} for i in range(112)],
            }
        )
    )

    image = encode(contents.programs, contents.alarms)
    restored = decode(image)

    assert restored == contents
    assert find_checksum_mismatches(image) == []
