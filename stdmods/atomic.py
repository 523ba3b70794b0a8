from __future__ import annotations

import os
import time


def _tmp_name_for(fname: str) -> str:
    return "%s-%d-%d" % (fname, os.getpid(), int(time.time() * 1e9))


# Generated list files are read by other tools, so swap them in with a single
# rename. Directory metadata is not synced.
def atomic_write_text(fname: str, text: str, encoding: str = "utf-8") -> None:
    tmpname = _tmp_name_for(fname)
    try:
        with open(tmpname, "wb") as f:
            f.write(text.encode(encoding))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmpname, fname)
    except BaseException:
        if os.path.exists(tmpname):
            os.unlink(tmpname)
        raise
