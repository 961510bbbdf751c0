from flask_wtf import FlaskForm
from wtforms import Form, StringField, TextAreaField, SubmitField, SelectMultipleField, FieldList, FormField, widgets
from wtforms.validators import DataRequired

from ...models.candidate import AVAILABILITY_TAGS


class MultiCheckboxField(SelectMultipleField):
    widget = widgets.ListWidget(prefix_label=False)
    option_widget = widgets.CheckboxInput()


class ExperienceForm(Form):
    # nested inside CandidateForm, so a plain wtforms.Form (no second csrf token)
    role = StringField("Role", render_kw={"placeholder": "Role (e.g. Software Engineer)"})
    company = StringField("Company", render_kw={"placeholder": "Company (e.g. Google)"})


class CandidateForm(FlaskForm):
    name = StringField("Full name", validators=[DataRequired()], render_kw={"placeholder": "Full name"})
    work_availability = MultiCheckboxField(
        "Availability",
        choices=[(t, t.capitalize()) for t in AVAILABILITY_TAGS],
        default=[],
    )
    work_experiences = FieldList(FormField(ExperienceForm), min_entries=1)
    submit = SubmitField("Add Candidate")


class ReasonForm(FlaskForm):
    reason = TextAreaField("Reason", render_kw={"rows": 2, "placeholder": "Reason..."})
