"""Minimal example for a stringify/parse round trip with key options."""

import datetime

from qs_dict import MapValue, QsOptions, SetValue, parse, stringify


def main() -> None:
    """Serialize nested filter state into a query string and read it back."""
    options = QsOptions(prefix="f-", case="kebab-case")
    state = {
        "searchTerm": "shoes & socks",
        "priceRange": [{"min": 10, "max": 100}],
        "createdAfter": datetime.date(2023, 1, 1),
        "sizes": SetValue(["m", "l"]),
        "sortOrder": MapValue([("price", "asc")]),
        "page": None,
    }

    query = stringify(state, options)
    print("query:", query)
    print("parsed:", parse(query, options))


if __name__ == "__main__":
    main()
