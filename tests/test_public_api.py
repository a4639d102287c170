import hillclimb


def test_public_names_resolve():
    missing = [name for name in hillclimb.__all__ if not hasattr(hillclimb, name)]
    assert missing == []
