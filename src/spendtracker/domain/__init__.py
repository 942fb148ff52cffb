"""Domain layer for spendtracker application.

Services are imported from their modules (e.g.
``spendtracker.domain.csv_import``) so that the database layer can depend on
``spendtracker.domain.entities`` without import cycles.
"""
