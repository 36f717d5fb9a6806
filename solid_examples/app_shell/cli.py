import argparse
import logging
import sys
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from pathlib import Path

from solid_examples.adapters.payment_stub import PaymentStubAdapter
from solid_examples.catalog import PRINCIPLES, get_principle
from solid_examples.components import dip, isp, lsp, ocp, srp
from solid_examples.rules import (
    DEFAULT_RULES_PATH,
    Rules,
    invoice_rates_from_rules,
    load_rules,
)

logger = logging.getLogger("cli")


def get_rules(path: Path) -> Rules:
    if not path.exists():
        logger.error(f"Rules file {path} not found.")
        sys.exit(1)

    try:
        return load_rules(path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def parse_amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"amount must be finite: {value!r}")
    return amount


def handle_list(rules: Rules, args: argparse.Namespace) -> None:
    for principle in PRINCIPLES:
        print(f"{principle.acronym}  {principle.name}")
        print(f"     {principle.summary}")


def handle_invoice(rules: Rules, args: argparse.Namespace) -> None:
    output = ocp.run(
        ocp.GetInvoiceInput(country=args.country, amount=args.amount),
        invoice_rates_from_rules(rules),
    )
    if not output.success:
        for error in output.errors:
            logger.error(error.message)
        sys.exit(1)

    assert output.document is not None
    print(output.document.render())


def handle_pay(rules: Rules, args: argparse.Namespace) -> None:
    gateway = PaymentStubAdapter(
        name=rules.payments.gateway,
        succeed=rules.payments.succeed and not args.decline,
    )
    output = dip.run(dip.MakePaymentInput(amount=args.amount), gateway=gateway)
    if not output.success:
        for error in output.errors:
            logger.error(error.message)
        sys.exit(1)

    assert output.result is not None
    print(f"Paid {output.result.amount} via {output.result.gateway} ({output.result.reference})")


# --- Walkthroughs ---


def demo_srp(rules: Rules) -> list[str]:
    lines = ["Violation: ReportManager fetches, formats and saves."]
    lines.append(srp.violation.ReportManager().generate())

    writer = srp.MemoryReportWriter()
    lines.append("Refactor: fetcher, formatter and writer composed by generate_report.")
    lines.append(srp.generate_report(srp.ReportFetcher(), srp.CsvReportFormatter(), writer))
    return lines


def demo_ocp(rules: Rules) -> list[str]:
    lines = ["Violation: InvoicePrinter branches on the country name."]
    lines.append(ocp.InvoicePrinter().print_invoice("india", Decimal("100")).render())

    lines.append("Refactor: get_invoice dispatches to an Invoice class per country.")
    rates = invoice_rates_from_rules(rules)
    for country in ocp.INVOICE_TYPES:
        lines.append(ocp.get_invoice(country, rates).generate(Decimal("100")).render())

    shapes = [ocp.Circle(1.0), ocp.Rectangle(2.0, 3.0), ocp.Triangle(4.0, 5.0)]
    lines.append(f"Total area of {len(shapes)} shapes: {ocp.total_area(shapes):.2f}")
    return lines


def demo_lsp(rules: Rules) -> list[str]:
    lines = ["Violation: Penguin extends Bird and breaks fly()."]
    try:
        lsp.violation.release_flock([lsp.violation.Bird(), lsp.violation.Penguin()])
    except lsp.FlightNotSupportedError as e:
        lines.append(f"  error: {e}")

    lines.append("Refactor: only FlyingAnimal implementations are released.")
    flyers, grounded = lsp.split_flyers([lsp.Bird(), lsp.Sparrow(), lsp.Penguin()])
    lines += lsp.release_flock(flyers)
    lines += lsp.feed_all(grounded)
    lines += [animal.swim() for animal in grounded if isinstance(animal, lsp.Penguin)]
    return lines


def demo_isp(rules: Rules) -> list[str]:
    document = isp.Document(title="report.pdf", body="Q3 numbers")
    lines = ["Violation: BasicPrinter must implement scan and fax."]
    try:
        isp.violation.BasicPrinter().scan_document(document)
    except NotImplementedError as e:
        lines.append(f"  error: {e}")

    lines.append("Refactor: devices implement only the ports they support.")
    for device in (isp.BasicPrinter(), isp.OfficeMachine()):
        capabilities = [
            port.__name__
            for port in (isp.PrinterPort, isp.ScannerPort, isp.FaxPort)
            if isinstance(device, port)
        ]
        lines.append(f"  {type(device).__name__}: {', '.join(capabilities)}")
    return lines


def demo_dip(rules: Rules) -> list[str]:
    lines = ["Violation: PaymentService builds its own CreditCardProcessor."]
    result = dip.violation.PaymentService().make_payment(Decimal("10"))
    lines.append(f"  charged {result.amount} via {result.gateway}")

    lines.append("Refactor: PaymentService receives any PaymentGatewayPort.")
    gateway = PaymentStubAdapter(name=rules.payments.gateway)
    result = dip.PaymentService(gateway).make_payment(Decimal("10"))
    lines.append(f"  charged {result.amount} via {result.gateway}, success={result.success}")
    return lines


DEMOS: dict[str, Callable[[Rules], list[str]]] = {
    "srp": demo_srp,
    "ocp": demo_ocp,
    "lsp": demo_lsp,
    "isp": demo_isp,
    "dip": demo_dip,
}


def handle_demo(rules: Rules, args: argparse.Namespace) -> None:
    principle = get_principle(args.principle)
    print(f"{principle.acronym}: {principle.name}")
    print(principle.summary)
    print()
    for line in DEMOS[args.principle](rules):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SOLID principle examples")
    parser.add_argument(
        "--rules", type=Path, default=DEFAULT_RULES_PATH, help="Path to rules.yaml"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    subparsers.add_parser("list", help="List the principles")

    # invoice
    invoice_parser = subparsers.add_parser("invoice", help="Generate a country invoice")
    invoice_parser.add_argument("country", help="Country name (india, germany)")
    invoice_parser.add_argument(
        "--amount", type=parse_amount, default=Decimal("100"), help="Net amount"
    )

    # pay
    pay_parser = subparsers.add_parser("pay", help="Pay through the stub gateway")
    pay_parser.add_argument("amount", type=parse_amount, help="Amount to charge")
    pay_parser.add_argument("--decline", action="store_true", help="Make the gateway decline")

    # demo
    demo_parser = subparsers.add_parser("demo", help="Walk through one principle")
    demo_parser.add_argument("principle", choices=sorted(DEMOS), type=str.lower)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    rules = get_rules(args.rules)
    logging.basicConfig(level=rules.logging.level)

    if args.command == "list":
        handle_list(rules, args)
    elif args.command == "invoice":
        handle_invoice(rules, args)
    elif args.command == "pay":
        handle_pay(rules, args)
    elif args.command == "demo":
        handle_demo(rules, args)


if __name__ == "__main__":
    main()
