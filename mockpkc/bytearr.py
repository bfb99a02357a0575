# -*- coding: utf-8 -*-

from .utils import NarrowingOverflow

import numpy as np
import collections.abc

class Bytearr:
    """plaintext as a sequence of 8-bit symbols

    actuallly wrapper of :class:`numpy.ndarray` with dtype uint8; str input is
    utf-8 encoded
    """

    _data = None

    def __init__(self, data, *, allow_borrow=False):
        if isinstance(data, Bytearr):
            data = data._data

        if isinstance(data, np.ndarray):
            assert data.ndim == 1
            if not allow_borrow:
                self._data = np.array(data, dtype=np.uint8)
                return
        elif isinstance(data, str):
            data = np.frombuffer(data.encode('utf-8'), dtype=np.uint8)
        elif isinstance(data, (bytes, bytearray)):
            data = np.frombuffer(bytes(data), dtype=np.uint8)
        else:
            if not isinstance(data, (list, tuple)):
                assert isinstance(data, collections.abc.Iterable)
                data = [np.uint8(i) for i in data]
        self._data = np.ascontiguousarray(data, dtype=np.uint8)

    def __eq__(self, rhs):
        if not isinstance(rhs, Bytearr):
            rhs = Bytearr(rhs)
        return (len(self) == len(rhs) and
                bool(np.all(self._data == rhs._data)))

    def __getitem__(self, idx):
        return Bytearr(self._data.__getitem__(idx), allow_borrow=True)

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return 'Bytearr({!r})'.format(self.to_bytes())

    def symbols(self):
        """symbol values as python ints"""
        return [int(i) for i in self._data]

    @classmethod
    def from_symbols(cls, values):
        """build from int symbol values, each of which must fit in 8 bits

        :raise NarrowingOverflow: if some value is outside [0, 256)
        """
        values = list(values)
        for idx, v in enumerate(values):
            if not 0 <= v < 256:
                raise NarrowingOverflow(
                    'symbol #{} has value {} which does not fit in 8 '
                    'bits'.format(idx, v))
        return cls(np.array(values, dtype=np.uint8), allow_borrow=True)

    def to_bytes(self):
        return self._data.tobytes()

    def to_str(self):
        """interpret as utf-8 encoded str"""
        return self._data.tobytes().decode('utf-8')
