import os
from typing import Generator

import pytest

# Tests assume the built-in defaults
for _key in [k for k in os.environ if k.upper().startswith("PAGEMETA_")]:
    del os.environ[_key]

from pagemeta.core.config import get_settings  # noqa: E402
from pagemeta.core.logging import configure_logging  # noqa: E402

configure_logging(debug=False)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
