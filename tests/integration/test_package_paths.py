def test_package_modules_present():
    import importlib

    for mod in [
        "hilbert_ranges",
        "hilbert_ranges.cfg",
        "hilbert_ranges.curve",
        "hilbert_ranges.geometry",
        "hilbert_ranges.query",
        "hilbert_ranges.query.bisect",
        "hilbert_ranges.query.corners",
        "hilbert_ranges.skilling",
        "hilbert_ranges.transform",
        "hilbert_ranges.utils",
    ]:
        assert importlib.import_module(mod) is not None
