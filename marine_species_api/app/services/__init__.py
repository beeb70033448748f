"""
Service layer.

Each service encapsulates the business rules for one entity and works
against a ``RecordStore`` it is given.  The ``Dispatcher`` sits on top
and exposes every operation with a uniform ``Ok``/``Err`` result.
"""
