"""Click commands of the ``sii-offerte`` CLI."""
