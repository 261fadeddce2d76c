"""The five examples and the lesson runner that drives them."""
