from typedispatch.dispatch import DispatchError, ProfileBuildError, UnsupportedTypeError, report


def test_report_message_shape() -> None:
    err = report("sum", "Bool")
    assert isinstance(err, UnsupportedTypeError)
    assert str(err) == "sum not implemented for 'Bool'"


def test_report_is_deterministic_and_does_not_raise() -> None:
    a = report("add", "ComplexFloat")
    b = report("add", "ComplexFloat")
    assert a is not b
    assert (a.op_name, a.type_name, str(a)) == (b.op_name, b.type_name, str(b))


def test_hierarchy() -> None:
    assert issubclass(UnsupportedTypeError, DispatchError)
    assert issubclass(UnsupportedTypeError, RuntimeError)
    assert issubclass(ProfileBuildError, DispatchError)
    assert issubclass(ProfileBuildError, ValueError)
