import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from core.database import Base, get_db
from core.initial_data import seed_admin_user


class PlanningFlowTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, future=True)

        # --- Dependency overrides ---
        def _get_db_override():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db_override
        self.client = TestClient(app)

        with self.SessionLocal() as db:
            seed_admin_user(db)

        r = self.client.post("/api/auth/login", json={"username": "admin", "password": "123456"})
        self.assertEqual(r.status_code, 200, r.text)
        self.admin = {"Authorization": f"Bearer {r.json()['data']['token']}"}

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        self.engine.dispose()

    def _login(self, username, password):
        r = self.client.post("/api/auth/login", json={"username": username, "password": password})
        self.assertEqual(r.status_code, 200, r.text)
        return {"Authorization": f"Bearer {r.json()['data']['token']}"}

    def test_me_resolves_seeded_admin(self):
        r = self.client.get("/api/auth/me", headers=self.admin)
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["data"]["username"], "admin")
        self.assertEqual(r.json()["data"]["role"], "admin")

    def test_wrong_password_401(self):
        r = self.client.post("/api/auth/login", json={"username": "admin", "password": "wrong"})
        self.assertEqual(r.status_code, 401)
        r = self.client.post("/api/auth/login", json={"username": "nobody", "password": "wrong"})
        self.assertEqual(r.status_code, 401)

    def test_bad_token_401(self):
        r = self.client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json()["error"], "Not authorized, token failed")

    def test_role_tiers(self):
        for username, role in (("sam", "staff"), ("mia", "management")):
            r = self.client.post("/api/users", headers=self.admin,
                                 json={"username": username, "password": "pw", "role": role})
            self.assertEqual(r.status_code, 201, r.text)
        staff = self._login("sam", "pw")
        mgmt = self._login("mia", "pw")

        # staff reads, cannot write
        self.assertEqual(self.client.get("/api/organizations", headers=staff).status_code, 200)
        r = self.client.post("/api/organizations", headers=staff, json={"org_name": "X"})
        self.assertEqual(r.status_code, 403)

        # management writes, cannot manage users
        r = self.client.post("/api/organizations", headers=mgmt, json={"org_name": "X"})
        self.assertEqual(r.status_code, 201, r.text)
        self.assertEqual(self.client.get("/api/users", headers=mgmt).status_code, 403)

    def test_full_planning_flow(self):
        h = self.admin

        # 1) Organization and strategy plan
        r = self.client.post("/api/organizations", headers=h, json={"org_name": "Org One", "vision": "V"})
        self.assertEqual(r.status_code, 201, r.text)
        org_id = r.json()["data"]["org_id"]

        r = self.client.post("/api/strategy-plans", headers=h, json={"org_id": 999, "plan_name": "SP"})
        self.assertEqual(r.status_code, 404)

        r = self.client.post("/api/strategy-plans", headers=h,
                             json={"org_id": org_id, "plan_name": "SP", "start_date": "2025-01-01"})
        self.assertEqual(r.status_code, 201, r.text)
        sp_id = r.json()["data"]["strategy_plan_id"]
        self.assertEqual(r.json()["data"]["status"], "Draft")

        # 2) Goals
        for desc, progress in (("G1", 20), ("G2", 50)):
            r = self.client.post("/api/strategic-goals", headers=h,
                                 json={"strategy_plan_id": sp_id, "goal_description": desc, "progress": progress})
            self.assertEqual(r.status_code, 201, r.text)

        # 3) Action plan + item
        r = self.client.post("/api/action-plans", headers=h,
                             json={"strategy_plan_id": sp_id, "year": 2025, "plan_name": "AP"})
        self.assertEqual(r.status_code, 201, r.text)
        ap_id = r.json()["data"]["action_plan_id"]

        r = self.client.post("/api/action-items", headers=h,
                             json={"action_plan_id": ap_id, "item_description": "Do", "due_date": "2025-05-01"})
        self.assertEqual(r.status_code, 201, r.text)
        item_id = r.json()["data"]["action_item_id"]

        # 4) Risk with no references, then one tied to the item
        r = self.client.post("/api/risks", headers=h, json={"risk_description": "Loose"})
        self.assertEqual(r.status_code, 201, r.text)
        self.assertEqual(r.json()["data"]["status"], "Identified")
        r = self.client.post("/api/risks", headers=h,
                             json={"risk_description": "Tied", "action_item_id": item_id, "risk_score": 8})
        self.assertEqual(r.status_code, 201, r.text)
        risk_id = r.json()["data"]["risk_id"]

        # 5) Delete guards
        r = self.client.delete(f"/api/action-plans/{ap_id}", headers=h)
        self.assertEqual(r.status_code, 400)
        r = self.client.delete(f"/api/action-items/{item_id}", headers=h)
        self.assertEqual(r.status_code, 400)
        self.assertEqual(self.client.delete(f"/api/risks/{risk_id}", headers=h).status_code, 200)
        self.assertEqual(self.client.delete(f"/api/action-items/{item_id}", headers=h).status_code, 200)

        # 6) Partial update leaves other fields alone
        r = self.client.put(f"/api/organizations/{org_id}", headers=h, json={})
        self.assertEqual(r.status_code, 200, r.text)
        self.assertEqual(r.json()["data"]["org_name"], "Org One")
        self.assertEqual(r.json()["data"]["vision"], "V")

        # 7) Dashboard
        r = self.client.get("/api/dashboard/overview", headers=h)
        self.assertEqual(r.status_code, 200, r.text)
        data = r.json()["data"]
        self.assertEqual(data["strategicGoalsCount"], 2)
        self.assertEqual(data["strategicGoalsProgress"], 35.0)
        self.assertEqual(data["risksCount"], 1)
        self.assertEqual(data["riskStatusSummary"], {"Identified": 1})

        r = self.client.get("/api/dashboard/strategic-kpi", headers=h)
        self.assertEqual(r.json()["count"], 2)
        self.assertEqual(r.json()["data"][0]["goal_description"], "G2")

        # 8) Default admin is protected
        me = self.client.get("/api/auth/me", headers=h).json()["data"]
        r = self.client.delete(f"/api/users/{me['id']}", headers=h)
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "Cannot delete default admin account")

    def test_seeded_admin_cannot_be_blanked_then_deleted(self):
        h = self.admin
        r = self.client.post("/api/users", headers=h, json={"username": "", "password": "", "role": "staff"})
        self.assertEqual(r.status_code, 400)

        admin_id = self.client.get("/api/auth/me", headers=h).json()["data"]["id"]
        r = self.client.put(f"/api/users/{admin_id}", headers=h, json={"username": ""})
        self.assertEqual(r.status_code, 400)

        r = self.client.delete(f"/api/users/{admin_id}", headers=h)
        self.assertEqual(r.status_code, 400)
        r = self.client.get("/api/auth/me", headers=h)
        self.assertEqual(r.json()["data"]["username"], "admin")
