"""HTTP surface: request decoding, dispatch and response shaping."""
