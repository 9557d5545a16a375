from gradekeeper.core.grades import score_to_grade

PRIMARY = "#2c3e50"
MUTED = "#95a5a6"
BACKGROUND = "#f0f4f8"
DANGER = "#e74c3c"
SUCCESS = "#27ae60"

GRADE_COLORS = {
    "秀": "#8e44ad",
    "優": "#27ae60",
    "良": "#2980b9",
    "可": "#f39c12",
}

BUTTON_COLORS = {
    "add": "#27ae60",
    "edit": "#2980b9",
    "subjects": "#e67e22",
    "delete": "#e74c3c",
    "export": "#8e44ad",
}

LEGEND = [
    ("秀", "90点以上"),
    ("優", "80〜89点"),
    ("良", "70〜79点"),
    ("可", "60〜69点"),
    ("不可", "59点以下"),
]


def grade_color(label: str) -> str | None:
    if label in ("-", "--", ""):
        return None
    # 不可 and 不可(出席)
    return GRADE_COLORS.get(label, DANGER)


def score_color(value: float) -> str:
    return grade_color(score_to_grade(value)) or DANGER


def attendance_color(sufficient: bool | None) -> str | None:
    if sufficient is None:
        return None
    return SUCCESS if sufficient else DANGER
