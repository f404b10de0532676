"""
Four-step quote wizard: Select Service -> Project Details -> Your Info -> Review.

The wizard is a plain object so it can be rebuilt from the hidden form state
on every request and driven by the quote routes.
"""
import re
import uuid

from fixitpapa.quote.calculator import calculate_quote
from fixitpapa.quote.configurations import QUOTE_CONFIGURATIONS


SELECT_SERVICE = 1
DETAILS = 2
CONTACT_INFO = 3
REVIEW = 4

STEPS = [
    (SELECT_SERVICE, "Select Service"),
    (DETAILS, "Project Details"),
    (CONTACT_INFO, "Your Info"),
    (REVIEW, "Review"),
]

CONTACT_FIELDS = ("name", "email", "phone", "address", "preferred_date", "notes")
REQUIRED_CONTACT_FIELDS = ("name", "email", "phone")
TOKEN_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class WizardError(Exception):
    pass


def coerce_answer(question, raw):
    """Convert a raw form or JSON value into the answer type of the question. None means unanswered."""
    if question.type == "number":
        if isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float)):
            value = raw
        else:
            try:
                value = int(str(raw).strip())
            except (TypeError, ValueError):
                return None
        if question.max is not None:
            value = min(value, question.max)
        return value

    if question.type == "checkbox":
        if raw is None:
            return []
        values = [raw] if isinstance(raw, str) else list(raw)
        return [v for v in values if question.find_option(v)]

    if raw is None:
        return None
    value = str(raw).strip()
    if not value or not question.find_option(value):
        return None
    return value


class QuoteWizard:
    def __init__(self, configurations=None, step=SELECT_SERVICE, service_id="", answers=None,
                 contact=None, submitted=False, error=None, submission_id=None, token=None):
        self.configurations = {c.service_id: c for c in (configurations or QUOTE_CONFIGURATIONS)}
        valid_step = isinstance(step, int) and not isinstance(step, bool) and step in dict(STEPS)
        self.step = step if valid_step else SELECT_SERVICE
        self.service_id = service_id if service_id in self.configurations else ""
        self.answers = dict(answers or {})
        self.contact = {k: "" for k in CONTACT_FIELDS}
        self.contact.update({k: str(v) for k, v in (contact or {}).items() if k in CONTACT_FIELDS})
        self.submitted = submitted
        self.error = error
        self.submission_id = submission_id
        # Identifies one filled-in request so a re-posted form is not stored twice
        self.token = token if isinstance(token, str) and TOKEN_PATTERN.match(token) else uuid.uuid4().hex

    @property
    def config(self):
        return self.configurations.get(self.service_id)

    @property
    def estimated_price(self):
        if not self.config:
            return 0
        return calculate_quote(self.config, self.answers)

    def _ensure_open(self):
        if self.submitted:
            raise WizardError("Quote already submitted")

    def select_service(self, service_id):
        self._ensure_open()
        if self.step != SELECT_SERVICE:
            raise WizardError("The service can only be changed on the first step")
        if service_id and service_id not in self.configurations:
            raise WizardError(f"Unknown service '{service_id}'")

        if service_id != self.service_id:
            # Answers belong to one service's question set
            self.answers = {}
        self.service_id = service_id or ""

    def set_answer(self, question_id, raw):
        self._ensure_open()
        if not self.config:
            raise WizardError("Select a service first")
        question = self.config.get_question(question_id)
        if not question:
            raise WizardError(f"Unknown question '{question_id}'")

        value = coerce_answer(question, raw)
        if value is None:
            self.answers.pop(question_id, None)
        else:
            self.answers[question_id] = value

    def update_contact(self, **fields):
        self._ensure_open()
        for key, value in fields.items():
            if key in CONTACT_FIELDS and value is not None:
                self.contact[key] = str(value).strip()

    def question_satisfied(self, question):
        answer = self.answers.get(question.id)
        if question.type == "number":
            floor = question.min if question.min is not None else 1
            return isinstance(answer, (int, float)) and not isinstance(answer, bool) and answer >= floor
        if question.type in ("select", "radio"):
            return bool(answer)
        return True

    def step_complete(self, step=None):
        step = step or self.step
        if step == SELECT_SERVICE:
            return bool(self.service_id)
        if step == DETAILS:
            if not self.config:
                return False
            return all(self.question_satisfied(q) for q in self.config.questions)
        if step == CONTACT_INFO:
            return all(self.contact.get(k) for k in REQUIRED_CONTACT_FIELDS)
        return True

    def next(self):
        """Advance one step. Returns False and stays put when the current step is incomplete."""
        self._ensure_open()
        if self.step >= REVIEW or not self.step_complete():
            return False
        self.step += 1
        self.error = None
        return True

    def back(self):
        self._ensure_open()
        if self.step > SELECT_SERVICE:
            self.step -= 1
        self.error = None

    def submission_payload(self):
        """Body for the quote submission service. Only available on the review step."""
        self._ensure_open()
        if self.step != REVIEW:
            raise WizardError("Quotes can only be submitted from the review step")
        config = self.config
        return {
            "serviceId": self.service_id,
            "serviceName": config.service_name if config else None,
            "answers": dict(self.answers),
            "estimatedPrice": self.estimated_price,
            "contactName": self.contact["name"],
            "contactEmail": self.contact["email"],
            "contactPhone": self.contact["phone"],
            "contactAddress": self.contact["address"],
            "preferredDate": self.contact["preferred_date"],
            "notes": self.contact["notes"],
        }

    def mark_submitted(self, submission_id=None):
        if self.step != REVIEW:
            raise WizardError("Quotes can only be submitted from the review step")
        self.submitted = True
        self.submission_id = submission_id
        self.error = None

    def mark_failed(self, message):
        self.error = message

    def reset(self):
        self.step = SELECT_SERVICE
        self.service_id = ""
        self.answers = {}
        self.contact = {k: "" for k in CONTACT_FIELDS}
        self.submitted = False
        self.error = None
        self.submission_id = None
        self.token = uuid.uuid4().hex

    def first_incomplete_step(self):
        for step in (SELECT_SERVICE, DETAILS, CONTACT_INFO):
            if not self.step_complete(step):
                return step
        return REVIEW

    def to_dict(self):
        return {
            "step": self.step,
            "service_id": self.service_id,
            "answers": self.answers,
            "contact": self.contact,
            "submitted": self.submitted,
            "token": self.token,
        }

    @classmethod
    def from_dict(cls, data, configurations=None):
        data = data if isinstance(data, dict) else {}
        wizard = cls(
            configurations=configurations,
            step=data.get("step", SELECT_SERVICE),
            service_id=data.get("service_id", ""),
            contact=data.get("contact") if isinstance(data.get("contact"), dict) else None,
            submitted=bool(data.get("submitted", False)),
            token=data.get("token"),
        )
        # Re-validate answers against the selected service's questions
        answers = data.get("answers") if isinstance(data.get("answers"), dict) else {}
        if wizard.config:
            for question in wizard.config.questions:
                value = coerce_answer(question, answers.get(question.id))
                if value is not None and value != []:
                    wizard.answers[question.id] = value
        # A posted step is only kept when every step before it is complete
        wizard.step = min(wizard.step, wizard.first_incomplete_step())
        return wizard
