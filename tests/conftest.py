import pytest

from skillswap import create_app
from skillswap.errors import StoreError
from skillswap.extensions import db
from skillswap.gateway import SqlGateway
from skillswap.services import Services


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway(app):
    return SqlGateway(db.session)


@pytest.fixture
def services(app):
    return app.extensions["skillswap_services"]


@pytest.fixture
def users(services):
    alice = services.users.create_user("Alice Brown", "alice@example.com", "secret")
    bob = services.users.create_user("Bob Johnson", "bob@example.com", "secret")
    carol = services.users.create_user("Carol White", "carol@example.com", "secret")
    return alice["id"], bob["id"], carol["id"]


class FailingGateway:
    """Gateway stand-in whose writes always fail."""

    def __init__(self):
        self.rollbacks = 0

    def execute(self, statement, params=()):
        raise StoreError("connection refused")

    def query_one(self, statement, params=()):
        raise StoreError("connection refused")

    def query_all(self, statement, params=()):
        raise StoreError("connection refused")

    def commit(self):
        pass

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def failing_gateway():
    return FailingGateway()


@pytest.fixture
def services_with_broken_notifications(app, failing_gateway):
    from skillswap.services import NotificationService

    wired = Services(SqlGateway(db.session), notifications=NotificationService(failing_gateway))
    app.extensions["skillswap_services"] = wired
    return wired
