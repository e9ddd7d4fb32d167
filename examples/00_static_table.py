"""
Static Table Example - No Interaction

Prints a sectioned table with styled cells and a footer, the way a report
command would.
"""
from lazy_tui import TableColumn, TableData, TableSection, table
from lazy_tui.text import TableCellStyle


def main():
    print("=" * 60)
    print("Static Table")
    print("=" * 60)

    data = TableData(
        columns=[
            TableColumn("Account"),
            TableColumn("Status", alignment="center"),
            TableColumn("Balance", alignment="right"),
        ],
        sections=[
            TableSection(
                [
                    ["Checking", TableCellStyle.success("open"), TableCellStyle.money(1520.4)],
                    ["Savings", TableCellStyle.success("open"), TableCellStyle.money(12000)],
                ],
                header=TableCellStyle.primary("Assets"),
            ),
            TableSection(
                [
                    ["Credit card", TableCellStyle.warning("due"), TableCellStyle.money(-310.99)],
                ],
                header=TableCellStyle.primary("Liabilities"),
            ),
        ],
        footer=[TableCellStyle.muted("Net"), "", TableCellStyle.money(13209.41)],
    )
    table(data)


if __name__ == "__main__":
    main()
