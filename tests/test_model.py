from lomake.model import FunctionDef, Variable


def test_variable_holds_type_and_value():
    var = Variable("int", "12")
    assert (var.type, var.value) == ("int", "12")


def test_variable_equality_is_by_value():
    assert Variable("str", "a") == Variable("str", "a")
    assert Variable("str", "a") != Variable("int", "a")


def test_variable_defaults_are_empty():
    assert Variable() == Variable("", "")


def test_function_def_defaults_are_independent():
    first = FunctionDef()
    second = FunctionDef()
    first.body.append("return 1!")
    first.params.append(("int", "a"))
    assert second.body == []
    assert second.params == []


def test_function_def_fields():
    func = FunctionDef("int", [("int", "a")], ["return a!"])
    assert func.return_type == "int"
    assert func.params == [("int", "a")]
    assert func.body == ["return a!"]