"""
Shared wiring for the API.

- `db`: the process-wide libSQL client and raw-SQL helpers
- `logging_config`: root logger setup

Interest SQL and business rules live in `interests/`.
"""
