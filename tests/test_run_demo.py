# tests/test_run_demo.py
import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "run_demo.py"


def load_script():
    spec = importlib.util.spec_from_file_location("run_demo", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_main_uses_given_args(capsys):
    load_script().main(["--n", "12", "--seed", "0"])
    out = capsys.readouterr().out
    assert "n: 12" in out
    assert "Ordenadas  -> altura: 12" in out
    assert "Mismo recorrido in-order: True" in out


def test_main_empty_list_means_defaults(capsys):
    # lista vacía = valores por defecto, no la línea de comandos de pytest
    load_script().main([])
    assert "n: 200" in capsys.readouterr().out
