"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── export.py         # File format: column names, reader, errors
    ├── models.py         # Dataclasses for the aggregated state
    └── {pass}.py         # One module per pass over the input

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``ebird/`` for the reference layout.

2. Write pass functions in two layers: one that consumes an iterable of
   parsed rows (easy to test) and a thin wrapper that opens the file::

       def load_things_rows(rows, state) -> AggregationState: ...

       def load_things(path: Path, state) -> AggregationState:
           return load_things_rows(export.read_export(path, COLUMNS), state)

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the pipeline (see ``flows/build.py``):
   - Add a ``@task`` that calls your pass function
   - Call it from ``build_all()`` in the right order

5. Add tests in ``tests/test_{name}.py``.
"""
