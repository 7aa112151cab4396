"""Page Object Model classes for the ngx-admin demo application."""

from .base_page import BasePage
from .dashboard_page import DashboardPage
from .date_picker_page import DatePickerPage
from .form_layouts_page import FormLayoutsPage
from .login_page import LoginPage
from .navigation_page import NavigationPage
from .register_page import RegisterPage
from .smart_table_page import SmartTablePage, TableRow
from .temperature_page import TemperaturePage
from .toaster_page import ToastConfig, ToasterPage, ToastText
from .tooltip_page import TooltipPage

__all__ = [
    "BasePage",
    "DashboardPage",
    "DatePickerPage",
    "FormLayoutsPage",
    "LoginPage",
    "NavigationPage",
    "RegisterPage",
    "SmartTablePage",
    "TableRow",
    "TemperaturePage",
    "ToastConfig",
    "ToastText",
    "ToasterPage",
    "TooltipPage",
]
