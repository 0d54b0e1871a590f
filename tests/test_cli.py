"""Tests for the command-line runner."""

from pysimple.cli import main, run_evaluate, run_sample
from pysimple.samples import SAMPLES, Sample, samples_by_name
from pysimple import Environment, If, NumberLiteral, DoNothing


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    for sample in SAMPLES:
        assert sample.name in out


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_run_all_samples(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("✓ machine") == len(SAMPLES)
    assert out.count("✓ compile") == len(SAMPLES)


def test_machine_trace(capsys):
    assert main(["loop", "--mode", "machine", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "«while (x < 5) { x = x * 3 }», {x: 1}" in out
    assert "«do-nothing», {x: 9}" in out
    assert "✓ evaluate" not in out


def test_unknown_sample(capsys):
    assert main(["nope"]) == 1
    assert "Unknown sample: nope" in capsys.readouterr().out


def test_step_bound_reports_non_termination(capsys):
    assert main(["loop", "--mode", "machine", "--max-steps", "3"]) == 1
    assert "NonTermination" in capsys.readouterr().out


def test_engine_error_exit_code(capsys):
    sample = Sample("bad", "number condition", If(NumberLiteral(1), DoNothing(), DoNothing()), Environment())
    assert run_sample(sample, mode="evaluate") == 1
    assert "TypeMismatch" in capsys.readouterr().out


def test_samples_by_name():
    assert set(samples_by_name()) == {sample.name for sample in SAMPLES}


def test_conditional_samples_take_both_branches():
    samples = samples_by_name()
    assert run_evaluate(samples["conditional"], None) == Environment.of(x=True, y=1)
    assert run_evaluate(samples["conditional-false"], None) == Environment.of(x=False, y=2)
    assert main(["conditional-false"]) == 0
