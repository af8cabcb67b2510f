from sqlalchemy import Enum as SAEnum


class StatusEnum(SAEnum):
    """String-backed enum column that tolerates case and whitespace drift.

    Values are stored as the enum's ``.value`` in a plain VARCHAR so the same
    schema works on SQLite and Postgres without a native enum type.
    """

    def __init__(self, enum_cls, **kwargs):
        self._enum_cls = enum_cls
        self._enum_kwargs = kwargs.copy()
        kwargs.setdefault("values_callable", lambda enum: [e.value for e in enum])
        kwargs.setdefault("native_enum", False)
        kwargs.setdefault("length", 32)
        super().__init__(enum_cls, **kwargs)

    def adapt(self, impltype, **kw):
        params = {**self._enum_kwargs, **kw}
        return StatusEnum(self._enum_cls, **params)

    @staticmethod
    def _normalize(value):
        if value is None:
            return None
        if isinstance(value, str):
            return value.strip().lower()
        return value.value

    def bind_processor(self, dialect):
        parent = super().bind_processor(dialect)

        def process(value):
            value = self._normalize(value)
            if parent and value is not None:
                return parent(value)
            return value

        return process

    def result_processor(self, dialect, coltype):
        parent = super().result_processor(dialect, coltype)

        def process(value):
            value = self._normalize(value)
            if parent and value is not None:
                return parent(value)
            return value

        return process
