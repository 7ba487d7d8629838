import json

import pytest

from machine_settings import MachineSettings
from settings_generator import build_rng, choose_pairs, generate, main


def test_choose_pairs_are_disjoint():
    pairs = choose_pairs(10, build_rng(7))
    assert len(pairs) == 10
    letters = "".join(pairs)
    assert len(set(letters)) == 20


def test_choose_pairs_is_capped():
    assert len(choose_pairs(40, build_rng(1))) == 13
    assert choose_pairs(0, build_rng(1)) == []


def test_generate_is_deterministic_with_seed():
    assert generate(build_rng(1337)) == generate(build_rng(1337))


@pytest.mark.parametrize("seed", range(5))
def test_generated_settings_build_machines(seed):
    settings = generate(build_rng(seed))
    assert len(set(settings.rotors)) == 3
    machine = settings.build()
    encrypted = machine.process("WEATHER REPORT")
    assert settings.build().process(encrypted) == "WEATHER REPORT"


def test_main_writes_key_sheet(tmp_path, capsys):
    out = tmp_path / "sheet.json"
    main(["--seed", "3", "--pairs", "6", "--outfile", str(out)])

    assert "Wrote" in capsys.readouterr().out
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["plugs"]) == 6
    assert MachineSettings.load(out) == generate(build_rng(3), 6)


def test_main_rejects_pair_count(tmp_path):
    with pytest.raises(SystemExit):
        main(["--pairs", "14", "--outfile", str(tmp_path / "x.json")])
