import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi import HTTPException

import models_bootstrap  # noqa: F401
from core.database import Base
from organization.models import Organization
from strategyplan.models import StrategyPlan
from department.models import Department
from user.models import User
from actionplan.schema import ActionPlanCreatePayload, ActionPlanUpdate
from actionplan import service as plan_service
from actionitem.schema import ActionItemCreatePayload, ActionItemUpdate
from actionitem import service as item_service
from department import service as department_service
from risk.models import Risk


class ActionServiceTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(cls.engine)
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)

    def setUp(self):
        self.db = self.SessionLocal()
        org = Organization(org_name="Org")
        self.db.add(org)
        self.db.flush()
        sp = StrategyPlan(org_id=org.org_id, plan_name="SP")
        dept = Department(department_name="Ops")
        user = User(username="jon", password_hash="x", role="staff", name="Jon")
        self.db.add_all([sp, dept, user])
        self.db.commit()
        self.sp_id, self.dept_id, self.user_id = sp.strategy_plan_id, dept.department_id, user.id

    def tearDown(self):
        for tbl in reversed(Base.metadata.sorted_tables):
            self.db.execute(tbl.delete())
        self.db.commit()
        self.db.close()

    def _plan(self):
        return plan_service.create_action_plan(
            self.db, ActionPlanCreatePayload(strategy_plan_id=self.sp_id, year=2025, plan_name="AP 2025")
        )

    def _item(self, plan_id, **kw):
        return item_service.create_action_item(
            self.db, ActionItemCreatePayload(action_plan_id=plan_id, item_description="Do it", **kw)
        )

    # ---------- action plans ----------
    def test_plan_defaults(self):
        plan = self._plan()
        self.assertEqual(plan.status, "Draft")
        self.assertEqual(plan.year, 2025)

    def test_plan_missing_strategy_plan_404(self):
        with self.assertRaises(HTTPException) as ctx:
            plan_service.create_action_plan(
                self.db, ActionPlanCreatePayload(strategy_plan_id=999, year=2025, plan_name="x")
            )
        self.assertEqual(ctx.exception.status_code, 404)

    def test_plan_delete_blocked_by_items_then_allowed(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id)

        with self.assertRaises(HTTPException) as ctx:
            plan_service.delete_action_plan(self.db, plan.action_plan_id)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("associated action items", ctx.exception.detail)

        item_service.delete_action_item(self.db, item.action_item_id)
        plan_service.delete_action_plan(self.db, plan.action_plan_id)
        self.assertEqual(plan_service.get_action_plans(self.db), [])

    def test_plan_update_null_year_400(self):
        plan = self._plan()
        with self.assertRaises(HTTPException) as ctx:
            plan_service.update_action_plan(self.db, plan.action_plan_id, ActionPlanUpdate(year=None))
        self.assertEqual(ctx.exception.status_code, 400)

    # ---------- action items ----------
    def test_item_defaults_and_references(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id, responsible_department_id=self.dept_id,
                          responsible_person_id=self.user_id)
        self.assertEqual(item.status, "Not Started")
        self.assertEqual(item.progress, 0)
        self.assertEqual(item.responsible_person_id, self.user_id)

    def test_item_missing_plan_404(self):
        with self.assertRaises(HTTPException) as ctx:
            self._item(12345)
        self.assertEqual(ctx.exception.detail, "Action plan not found")

    def test_item_reports_first_missing_reference(self):
        plan = self._plan()
        with self.assertRaises(HTTPException) as ctx:
            self._item(plan.action_plan_id, goal_id=77, responsible_department_id=88)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.detail, "Strategic goal not found")
        self.assertEqual(item_service.get_action_items(self.db), [])

    def test_item_update_revalidates_changed_reference(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id)
        with self.assertRaises(HTTPException) as ctx:
            item_service.update_action_item(self.db, item.action_item_id,
                                            ActionItemUpdate(responsible_person_id=999))
        self.assertEqual(ctx.exception.detail, "Responsible person not found")

    def test_item_update_zero_and_empty_string(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id, progress=60, kpi="NPS", budget=10.5)
        updated = item_service.update_action_item(
            self.db, item.action_item_id, ActionItemUpdate(progress=0, kpi="", budget=0)
        )
        self.assertEqual(updated.progress, 0)
        self.assertEqual(updated.kpi, "")
        self.assertEqual(updated.budget, 0)

    def test_item_delete_blocked_by_risk(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id)
        self.db.add(Risk(risk_description="Vendor late", action_item_id=item.action_item_id))
        self.db.commit()
        with self.assertRaises(HTTPException) as ctx:
            item_service.delete_action_item(self.db, item.action_item_id)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn("associated risks", ctx.exception.detail)

    # ---------- departments ----------
    def test_department_delete_blocked_while_assigned(self):
        plan = self._plan()
        item = self._item(plan.action_plan_id, responsible_department_id=self.dept_id)
        with self.assertRaises(HTTPException) as ctx:
            department_service.delete_department(self.db, self.dept_id)
        self.assertEqual(ctx.exception.status_code, 400)

        item_service.update_action_item(self.db, item.action_item_id,
                                        ActionItemUpdate(responsible_department_id=None))
        department_service.delete_department(self.db, self.dept_id)
        self.assertEqual(department_service.get_departments(self.db), [])
