"""Core codec, crypto, address derivation and instruction builders."""
