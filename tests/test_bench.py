"""
Tests for the benchmark script
==============================

Runs `bench/bench.py` in-process on a tiny channel.
"""

import os
import runpy
import sys

import pytest

pytest.importorskip("numpy")

BENCH = os.path.join(os.path.dirname(__file__), '..', 'bench', 'bench.py')


def _run_bench(monkeypatch, tmp_path, *argv):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, 'argv', ['bench.py'] + list(argv))
    runpy.run_path(BENCH, run_name='__main__')


def test_bench_reports_averages(monkeypatch, tmp_path, capsys):
    _run_bench(monkeypatch, tmp_path, '-n', '4', '-s', '2', '-i', '2', '--seed', '1')

    out = capsys.readouterr().out
    assert "Enc:" in out
    assert "Dec:" in out
    for name in ('bench4_setup.csv', 'bench4_enc.csv', 'bench4_dec.csv'):
        assert (tmp_path / name).exists()
    with open(tmp_path / 'bench4_enc.csv') as f:
        assert len(f.read().splitlines()) == 3


@pytest.mark.parametrize("iters", ['0', '-1'])
def test_bench_rejects_zero_iterations(monkeypatch, tmp_path, capsys, iters):
    with pytest.raises(SystemExit):
        _run_bench(monkeypatch, tmp_path, '-n', '4', '-i', iters)

    assert "at least 1" in capsys.readouterr().out
    assert not (tmp_path / 'bench4_setup.csv').exists()
