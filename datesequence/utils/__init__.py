from .date import (
    DEFAULT_DATE_FORMAT,
    DashedDateFormatter,
    format_date,
    parse_date,
    set_shared_formatter,
    shared_formatter,
    to_date,
)
