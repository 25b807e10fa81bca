import unittest

from sqlmodel import Session, SQLModel

from backend.app.audit.service import log_event, validate_chain, get_audit_logs
from backend.app.core.database import engine
from backend.app.models.Audit import GENESIS_HASH
from helpers import ApiTestCase


class TestAuditChain(unittest.TestCase):

    def setUp(self):
        SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        self.session = Session(engine)
        self.addCleanup(self.session.close)

    def test_entries_are_linked(self):
        first = log_event(self.session, "user-1", "LOGIN")
        second = log_event(self.session, None, "LOGOUT", "details")

        self.assertEqual(first.previous_hash, GENESIS_HASH)
        self.assertEqual(second.previous_hash, first.current_hash)
        self.assertEqual(second.actor_id, "anonymous")
        self.assertEqual(validate_chain(self.session), (True, None))

    def test_tampering_is_detected(self):
        log_event(self.session, "user-1", "LOGIN")
        tampered = log_event(self.session, "user-1", "POST /notes 201 Created")
        log_event(self.session, "user-1", "LOGOUT")

        tampered.action = "TAMPERED_ACTION"
        self.session.add(tampered)
        self.session.commit()

        self.assertEqual(validate_chain(self.session), (False, tampered.id))


class TestAuditApi(ApiTestCase):

    def test_security_events_are_recorded(self):
        token = self.token_for("joao", "SenhaSegura123", "Editor")
        self.login("joao", "errada")
        self.client.post("/api/v1/auth/logout", headers=self.bearer(token))
        self.client.post("/api/v1/auth/logout", headers=self.bearer(token))

        with Session(engine) as session:
            entries = get_audit_logs(session)
        actions = [entry.action for entry in entries]
        self.assertTrue(any(a.startswith("POST /register 201") for a in actions))
        self.assertTrue(any(a.startswith("POST /login 401") for a in actions))
        self.assertTrue(any(a.startswith("POST /logout 200") for a in actions))
        self.assertIn("Revoked", [entry.details for entry in entries])

    def test_admin_verifies_chain(self):
        admin = self.admin_token()
        response = self.client.get("/api/v1/audit/verify", headers=self.bearer(admin))

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["valid"])
        self.assertGreaterEqual(response.json()["entries"], 1)

        log = self.client.get("/api/v1/audit/log", headers=self.bearer(admin))
        self.assertEqual(log.status_code, 200)
        self.assertEqual(len(log.json()), response.json()["entries"])

    def test_reader_cannot_read_audit_log(self):
        token = self.token_for("reader", "SenhaSegura123", "Reader")
        self.assertEqual(self.client.get("/api/v1/audit/log", headers=self.bearer(token)).status_code, 403)


if __name__ == "__main__":
    unittest.main()
