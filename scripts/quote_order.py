from __future__ import annotations

import argparse

from services.courier.app.domain.errors import OrderError
from services.courier.app.domain.factory import OrderBuilder
from services.courier.app.services.audit import LoggingObserver
from services.courier.app.services.catalog_factory import get_catalog
from services.courier.app.services.pricing_factory import get_cost_pipeline


def _parse_line(value: str) -> tuple[str, int]:
    item_id, sep, qty = value.rpartition(":")
    if not sep or not item_id:
        raise argparse.ArgumentTypeError(f"Expected ITEM:QTY, got {value!r}")
    try:
        return item_id, int(qty)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Quantity must be an integer in {value!r}") from e


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build an order and print its quote")
    parser.add_argument("--customer", default="Unknown")
    parser.add_argument("--address", default="Unknown")
    parser.add_argument("--special", action="store_true", help="Create a special order")
    parser.add_argument("--express", action="store_true", help="Request express delivery")
    parser.add_argument("--note", default=None)
    parser.add_argument(
        "--line",
        dest="lines",
        action="append",
        type=_parse_line,
        default=[],
        metavar="ITEM:QTY",
        help="Catalog item id and quantity (repeatable)",
    )
    parser.add_argument(
        "--advance",
        type=int,
        default=0,
        help="Number of times to advance the order status",
    )
    args = parser.parse_args(argv)

    try:
        catalog = get_catalog()
        builder = OrderBuilder()
        if args.special or args.express:
            builder.special(
                args.customer, args.address, express_requested=args.express, note=args.note
            )
        else:
            builder.standard(args.customer, args.address)
        for item_id, quantity in args.lines:
            builder.add(catalog.get(item_id), quantity)

        order = builder.build()
        order.subscribe(LoggingObserver())
        for _ in range(args.advance):
            for failure in order.advance():
                print(f"WARN {failure.kind}: {failure.message}")

        total = get_cost_pipeline().compute_total(order)
    except OrderError as e:
        print(f"ERR {e.kind}: {e}")
        return 2
    except ValueError as e:
        print(f"ERR ConfigError: {e}")
        return 2

    for line in order.lines:
        print(f"{line.item.name} x{line.quantity} = {line.line_total}")
    print(f"Order {order.id} [{order.status.value}] total={total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
