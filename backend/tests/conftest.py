import pytest
from pydantic_extra_types.coordinate import Coordinate


@pytest.fixture
def student_center():
    """Fixture providing the Chavis Student Center coordinate"""
    return Coordinate(latitude=34.7270, longitude=-79.0187)  # type: ignore


@pytest.fixture
def library():
    """Fixture providing the Mary Livermore Library coordinate"""
    return Coordinate(latitude=34.7265, longitude=-79.0175)  # type: ignore


@pytest.fixture
def quad():
    """Fixture providing a coordinate just north of the student center"""
    return Coordinate(latitude=34.7275, longitude=-79.0180)  # type: ignore


@pytest.fixture
def campus_waypoints(student_center, library, quad):
    """Fixture providing three campus waypoints in request order"""
    return [student_center, library, quad]
