# models_bootstrap.py
from user import models as _user_models
from organization import models as _org_models
from strategyplan import models as _strategy_plan_models
from strategicgoal import models as _strategic_goal_models
from hrdevplan import models as _hr_dev_plan_models
from hrdevinitiative import models as _hr_dev_initiative_models
from digitaldevplan import models as _digital_dev_plan_models
from digitalinitiative import models as _digital_initiative_models
from department import models as _department_models
from actionplan import models as _action_plan_models
from actionitem import models as _action_item_models
from riskplan import models as _risk_plan_models
from risk import models as _risk_models
