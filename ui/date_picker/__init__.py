"""Date picker UI components."""

from ui.date_picker.interaction_filter import PopupEventFilter, QtInteractionListeners
from ui.date_picker.widget import DatePickerWidget

__all__ = ['DatePickerWidget', 'PopupEventFilter', 'QtInteractionListeners']
