from datetime import datetime, timedelta, timezone

import pytest

from eventjson import JsonCodec

EDT = timezone(timedelta(hours=-4))


@pytest.fixture
def codec():
    return JsonCodec()


@pytest.fixture
def timestamp():
    return datetime(2018, 4, 26, 14, 48, 9, 769000, tzinfo=EDT)
