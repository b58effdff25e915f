"""Core provider logic, independent of the host plugin runtime.

Module Structure:
    - platform/     : Platform REST API client and typed exceptions
    - schema.py     : Field schemas, resource state container, resource entry points
    - validators.py : Composite identifier encode/decode and validation
    - pair.py       : Resources keyed by a ``left|right`` identifier

Public APIs:
    Pair binding (tfprovider.core.pair):
        - PairID.schema()
        - PairID.bind_resource()
        - BindResource
        - CallbackOutcome

    Resource model (tfprovider.core.schema):
        - FieldType, FieldSchema
        - ResourceData
        - Resource

    Platform client (tfprovider.core.platform):
        - PlatformClient
        - APIError, NotFoundError
"""
