"""Plug the JSON adapters into a minimal event envelope."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import eventjson


@dataclass
class Order:
    id: str
    placed: datetime
    items: list[str] = field(default_factory=list)


@dataclass
class Event:
    attributes: dict[str, Any]
    data: Any


def main():
    eventjson.logs.init(debug_level=1)

    marshal = eventjson.marshaller()
    unmarshal = eventjson.unmarshaller(Order)

    placed = datetime(2018, 4, 26, 14, 48, 9, 769000, tzinfo=timezone(timedelta(hours=-4)))
    event = Event({'type': 'com.example.order.placed'}, Order('123', placed, ['book']))

    payload = marshal(event.data, {'content-type': 'application/json'})
    print(f'{payload=}')

    order = unmarshal(payload, event.attributes)
    print(f'{order=}')
    print(f'{order.placed.utcoffset()=}')


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
