"""Example: calculate a balance from an in-memory table (no browser, no files)."""

from decimal import Decimal

from src.flextime_account.flextime_account.balance.service import BalanceService
from src.flextime_account.flextime_account.policy.schema import Policy

TABLE = "\n".join(
    [
        "Datum;Anwesenheitsart;Text;Genehmigt;Dauer;Einheit;Beginn;Ende",
        "03.01.2022;1000 Normal;;;;;08:00;16:30",
        "04.01.2022;1000 Normal;;;;;08:00;16:30",
        "05.01.2022;1000 Normal;;;;;08:00;16:30",
        "06.01.2022;1000 Normal;;;;;08:00;16:30",
        "07.01.2022;1000 Normal;;;;;08:00;16:30",
        "",
    ]
)


class InMemoryTable:
    def __init__(self, text: str):
        self._text = text

    def read_text(self) -> str:
        return self._text


def main():
    service = BalanceService(InMemoryTable(TABLE))
    result = service.calculate(Policy(weekly_hours=Decimal(40)))
    print(result.balance_label, result.last_considered_date)


if __name__ == "__main__":
    main()
