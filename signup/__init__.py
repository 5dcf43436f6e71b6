"""
signup - Client-side account registration workflow.

Collects credentials, validates them as they are typed, scores password
strength, submits the registration and reconciles the outcome into form
state, session state and notifications.
"""

from signup.dependencies import create_sign_up_form
from signup.domain import FormField, SignUpForm, SubmitOutcome

__all__ = ["FormField", "SignUpForm", "SubmitOutcome", "create_sign_up_form"]

__version__ = "0.1.0"
