import os
import subprocess
import sys
from pathlib import Path

from mo_reader import MachineObjectReader, read_catalog

REPO = Path(__file__).resolve().parents[1]


def run(args, cwd):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO / "src"), env.get("PYTHONPATH")]))
    return subprocess.run([sys.executable, *args], cwd=cwd, env=env, check=False, capture_output=True, text=True)


def test_pt_pt_catalog_and_corruption(tmp_path):
    r = run(["tools/make_catalog.py", str(tmp_path)], cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout

    mo = tmp_path / "pt-PT" / "default.mo"
    assert mo.exists()

    catalog = read_catalog(mo, "latin-1")
    assert catalog.encoding == "latin-1"
    assert catalog.version == (0, 0)
    assert catalog.messages["Hello World"] == "Olá Mundo"
    assert catalog.messages["Goodbye World"] == "Adeus Mundo"
    assert catalog.messages[""].startswith("Project-Id-Version: sample")
    assert len(catalog) == 3

    # Repeated reads of the unchanged file agree.
    assert read_catalog(mo, "latin-1") == catalog

    # Corrupt the magic and ensure failure
    r = run(["scripts/corrupt_one_byte.py", str(mo)], cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout

    with MachineObjectReader(open(mo, "rb"), "latin-1") as reader:
        result = reader.try_decode()
    assert result.status == "FAIL"
    assert result.error_code == "E_SIGNATURE"
