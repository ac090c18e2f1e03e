import pytest

from restler import Restler
from tests.sdk.mocks import DispatchQueueManagerMock, NetworkingMock


@pytest.fixture
def networking() -> NetworkingMock:
    return NetworkingMock()


@pytest.fixture
def dispatch_queue_manager() -> DispatchQueueManagerMock:
    return DispatchQueueManagerMock()


@pytest.fixture
def client(
    base_url: str,
    networking: NetworkingMock,
    dispatch_queue_manager: DispatchQueueManagerMock,
) -> Restler:
    return Restler(
        base_url,
        networking=networking,
        dispatch_queue_manager=dispatch_queue_manager,
    )
