import os
import tempfile

# db.py reads DATABASE_URL at import time, so point it at a throwaway file first
_TMP_DIR = tempfile.mkdtemp(prefix="integer-arena-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ.pop("ADMIN_TOKEN", None)
