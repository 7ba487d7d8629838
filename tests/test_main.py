import builtins

import pytest

from machine_settings import MachineSettings
from main import Config, group, main, run_message


def test_group():
    assert group("ABCDEFGHIJKL", 5) == "ABCDE FGHIJ KL"
    assert group("ABCDE", 0) == "ABCDE"


def test_run_message_round_trip():
    settings = MachineSettings([0, 1, 2], [0, 0, 0], [0, 0, 0])
    lines = run_message(settings, Config(), "HELLO")
    assert lines[0] == "Output: " + settings.build().process("HELLO")
    assert lines[1] == "Check:  HELLO"


def test_message_from_flags(capsys):
    main(["-m", "Hello World", "--rotors", "I", "II", "III", "--positions", "AAA", "--plugs", "AB", "CD"])
    out = capsys.readouterr().out.splitlines()
    expected = MachineSettings([0, 1, 2], [0, 0, 0], [0, 0, 0], ["AB", "CD"]).build().process("Hello World")
    assert out[0] == f"Output: {expected}"
    assert out[1] == "Check:  HELLO WORLD"


def test_no_verify_and_blocks(capsys):
    main(["-m", "AAAAAAAAAA", "--reflector", "B", "--no-verify", "--block", "5"])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0].startswith("Output: BDZGO ")


def test_message_from_config(tmp_path, capsys):
    path = MachineSettings([2, 0, 1], [1, 2, 3], [4, 5, 6], ["QZ"], "C").save(tmp_path / "key.json")
    main(["--config", str(path), "-m", "SECRET"])
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Check:  SECRET"


@pytest.mark.parametrize(
    "argv",
    [
        ["-m", "X", "--plugs", "AA"],
        ["-m", "X", "--positions", "AA"],
        ["-m", "X", "--rotors", "I", "I", "IX"],
        ["-m", "X", "--config", "does-not-exist.json"],
    ],
)
def test_bad_settings_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert "Invalid machine settings" in str(exc.value)


def test_repl_until_blank_line(monkeypatch, capsys):
    answers = iter(["hello", ""])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    main([])
    out = capsys.readouterr().out
    assert "Check:  HELLO" in out


def test_unreadable_rotor_list_in_config_exits(tmp_path):
    path = tmp_path / "key.json"
    path.write_text('{"rotors": 5, "positions": "AAA", "rings": "AAA"}', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path), "-m", "X"])
    assert "Invalid machine settings" in str(exc.value)
