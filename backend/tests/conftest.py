import sys
from pathlib import Path


# Allow `from semant...` imports when running tests from repo root.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest


@pytest.fixture
def bitext_settings():
    from semant.core.config import Settings

    return Settings(
        bitext_endpoint="http://bitext.test/WS_NOps_Val/Service.aspx",
        bitext_user="user",
        bitext_password="pass",
        bitext_timeout=5,
        bitext_max_source_length=8192,
    )


def make_result_xml(values, *, encoding=None, quoted=False, texts=None) -> str:
    prolog = f'<?xml version="1.0" encoding="{encoding}"?>' if encoding else '<?xml version="1.0"?>'
    blocks = []
    for index, value in enumerate(values, start=1):
        text = (texts or {}).get(index, f"sentence {index}")
        if quoted:
            blocks.append(
                f'<BLOCK>\r\n<ID>"{index}"</ID>\r\n<GLOBAL_VALUE>"{value}"</GLOBAL_VALUE>\r\n<TEXT>"{text}"</TEXT>\r\n</BLOCK>'
            )
        else:
            blocks.append(f"<BLOCK><ID>{index}</ID><GLOBAL_VALUE>{value}</GLOBAL_VALUE><TEXT>{text}</TEXT></BLOCK>")
    return prolog + "\n<RESULT>\n" + "\n".join(blocks) + "\n</RESULT>\n"


@pytest.fixture
def result_xml():
    return make_result_xml
