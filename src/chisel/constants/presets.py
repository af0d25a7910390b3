"""Expected-symbol tables for the built-in check presets.

Signatures are ``(params, results)`` pairs of value type names.
"""

from __future__ import annotations

from typing import TypeAlias

RawSignature: TypeAlias = tuple[tuple[str, ...], tuple[str, ...]]

EWASM_PRESET: str = "ewasm"

EWASM_MAIN_EXPORT: str = "main"
EWASM_MEMORY_EXPORT: str = "memory"

# (name, kind, signature); signature is only set for function exports.
EWASM_EXPORTS: tuple[tuple[str, str, RawSignature | None], ...] = (
    (EWASM_MAIN_EXPORT, "function", ((), ())),
    (EWASM_MEMORY_EXPORT, "memory", None),
)

EWASM_IMPORT_NAMESPACE: str = "ethereum"

# Ethereum Environment Interface host functions.
EWASM_IMPORTS: tuple[tuple[str, RawSignature], ...] = (
    ("useGas", (("i64",), ())),
    ("getGasLeft", ((), ("i64",))),
    ("getAddress", (("i32",), ())),
    ("getExternalBalance", (("i32", "i32"), ())),
    ("getBlockHash", (("i64", "i32"), ("i32",))),
    ("getBlockCoinbase", (("i32",), ())),
    ("getBlockDifficulty", (("i32",), ())),
    ("getBlockGasLimit", ((), ("i64",))),
    ("getBlockNumber", ((), ("i64",))),
    ("getBlockTimestamp", ((), ("i64",))),
    ("getTxGasPrice", (("i32",), ())),
    ("getTxOrigin", (("i32",), ())),
    ("getCaller", (("i32",), ())),
    ("getCallValue", (("i32",), ())),
    ("getCallDataSize", ((), ("i32",))),
    ("callDataCopy", (("i32", "i32", "i32"), ())),
    ("getCodeSize", ((), ("i32",))),
    ("codeCopy", (("i32", "i32", "i32"), ())),
    ("getExternalCodeSize", (("i32",), ("i32",))),
    ("externalCodeCopy", (("i32", "i32", "i32", "i32"), ())),
    ("getReturnDataSize", ((), ("i32",))),
    ("returnDataCopy", (("i32", "i32", "i32"), ())),
    ("storageStore", (("i32", "i32"), ())),
    ("storageLoad", (("i32", "i32"), ())),
    ("log", (("i32", "i32", "i32", "i32", "i32", "i32", "i32"), ())),
    ("call", (("i64", "i32", "i32", "i32", "i32"), ("i32",))),
    ("callCode", (("i64", "i32", "i32", "i32", "i32"), ("i32",))),
    ("callDelegate", (("i64", "i32", "i32", "i32"), ("i32",))),
    ("callStatic", (("i64", "i32", "i32", "i32"), ("i32",))),
    ("create", (("i32", "i32", "i32", "i32"), ("i32",))),
    ("finish", (("i32", "i32"), ())),
    ("revert", (("i32", "i32"), ())),
    ("selfDestruct", (("i32",), ())),
)
