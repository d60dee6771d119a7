"""SQL templates for the card repository.

Templates use ``:name`` placeholders and are bound by ``StatementBinder``.
Metadata and payload are always selected separately.
"""

from cardstore.database import Dialect

QUERY_BASE = """
SELECT
 card_id
,card_build
,card_stage
,card_step
,card_schema
"""

QUERY_CARD_DATA = """
SELECT
 card_id
,card_data
"""

QUERY_BY_BUILD = QUERY_BASE + """
FROM cards
WHERE card_build = :card_build
"""

QUERY_BY_STEP = QUERY_BASE + """
FROM cards
WHERE card_step = :card_step
LIMIT 1
"""

QUERY_DATA_BY_ID = QUERY_CARD_DATA + """
FROM cards
WHERE card_id = :card_id
LIMIT 1
"""

INSERT_CARD = """
INSERT INTO cards (
 card_build
,card_stage
,card_step
,card_schema
,card_data
) VALUES (
 :card_build
,:card_stage
,:card_step
,:card_schema
,:card_data
)
"""

INSERT_CARD_RETURNING = INSERT_CARD + """
RETURNING card_id
"""

DELETE_CARD = """
DELETE FROM cards
WHERE card_id = :card_id
"""

# Insert statement per dialect; dialects without RETURNING use lastrowid
INSERT_STATEMENTS = {
    Dialect.POSTGRES: INSERT_CARD_RETURNING,
    Dialect.SQLITE: INSERT_CARD,
    Dialect.MYSQL: INSERT_CARD,
}
