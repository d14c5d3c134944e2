from wbi.jupyter import jupyter_path_for, remove_non_opt_python, remove_string


def test_remove_string_removes_first_occurrence_only():
    items = ["a", "b", "a", "c"]
    assert remove_string(items, "a") == ["b", "a", "c"]


def test_remove_string_does_not_modify_input():
    items = ["/opt/python/3.11.2/bin/python", "/usr/bin/python3"]
    result = remove_string(items, "/usr/bin/python3")
    assert result == ["/opt/python/3.11.2/bin/python"]
    assert items == ["/opt/python/3.11.2/bin/python", "/usr/bin/python3"]


def test_remove_string_missing_value_keeps_everything():
    items = ["x", "y"]
    assert remove_string(items, "z") == items


def test_remove_non_opt_python():
    paths = [
        "/opt/python/3.11.2/bin/python",
        "/usr/bin/python3",
        "/opt/Python/3.10.10/bin/python",
        "/usr/local/bin/python",
    ]
    assert remove_non_opt_python(paths) == [
        "/opt/python/3.11.2/bin/python",
        "/opt/Python/3.10.10/bin/python",
    ]


def test_remove_non_opt_python_result_is_subset():
    paths = ["/usr/bin/python3", "/opt/python/3.9.16/bin/python"]
    result = remove_non_opt_python(paths)
    assert set(result) <= set(paths)
    assert all("/opt" in path for path in result)


def test_jupyter_path_for_opt_python():
    assert (
        jupyter_path_for("/opt/python/3.11.2/bin/python")
        == "/opt/python/3.11.2/bin/jupyter"
    )


def test_jupyter_path_for_python3_binary():
    assert jupyter_path_for("/usr/bin/python3") == "/usr/bin3/jupyter"


def test_jupyter_path_for_path_without_python():
    assert jupyter_path_for("/usr/bin/py") == "/usr/bin/py/jupyter"