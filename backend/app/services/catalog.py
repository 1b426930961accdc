from __future__ import annotations

from app.schemas.timetable import Department, Subject, TimeSlot

DAYS: list[str] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

STREAM_NONE = "None"

DEPARTMENTS_STRUCTURE: dict[Department, list[str]] = {
    Department.CRECHE: ["Creche"],
    Department.NURSERY: ["Nursery 1", "Nursery 2"],
    Department.KG: ["KG 1", "KG 2"],
    Department.LOWER_BASIC: ["Basic 1", "Basic 2", "Basic 3"],
    Department.UPPER_BASIC: ["Basic 4", "Basic 5", "Basic 6"],
    Department.JHS: ["Basic 7", "Basic 8", "Basic 9"],
}


def _subject(id: str, name: str, category: str, color: str, goal: str | None = None) -> Subject:
    return Subject(id=id, name=name, category=category, color=color, goal=goal)


def _slot(start: str, end: str, label: str, **flags: bool) -> TimeSlot:
    return TimeSlot(start_time=start, end_time=end, label=label, **flags)


TIME_SLOTS: list[TimeSlot] = [
    _slot("08:00", "08:30", "Morning Assembly", is_assembly=True),
    _slot("08:30", "09:10", "Period 1"),
    _slot("09:10", "09:50", "Period 2"),
    _slot("09:50", "10:20", "Snack Break", is_break=True),
    _slot("10:20", "11:00", "Period 3"),
    _slot("11:00", "11:40", "Period 4"),
    _slot("11:40", "12:40", "Lunch Break", is_break=True),
    _slot("12:40", "13:20", "Period 5"),
    _slot("13:20", "14:00", "Period 6"),
    _slot("14:00", "14:40", "Period 7"),
    _slot("14:40", "15:00", "Afternoon Assembly", is_assembly=True),
]

# Early morning and after-school remedial lanes.
SUPPORT_TIME_SLOTS: list[TimeSlot] = [
    _slot("06:30", "07:30", "Early Bird Mastery", is_support=True),
    _slot("15:30", "16:15", "After-School Clinic 1", is_support=True),
    _slot("16:15", "17:00", "After-School Clinic 2", is_support=True),
]

INTERVENTION_SUBJECTS: list[Subject] = [
    _subject("int-read", "Reading Mastery", "Intervention", "bg-violet-600 text-white", "Fluency & Phonetics"),
    _subject("int-write", "Creative Writing", "Intervention", "bg-fuchsia-600 text-white", "Composition & Grammar"),
    _subject("int-logic", "Logic & Puzzles", "Intervention", "bg-amber-500 text-white", "Problem Solving"),
    _subject("int-alert", "Cognitive Alertness", "Intervention", "bg-rose-500 text-white", "Memory & Speed"),
    _subject("int-drill", "Arithmetic Drills", "Intervention", "bg-emerald-600 text-white", "Accuracy"),
]

_EARLY_YEARS_CORE: list[Subject] = [
    _subject("lit", "Language & Literacy", "Core", "bg-blue-100 border-blue-300"),
    _subject("num", "Numeracy", "Core", "bg-green-100 border-green-300"),
    _subject("env", "Environmental Studies", "Core", "bg-yellow-100 border-yellow-300"),
]

_BASIC_SUBJECTS: list[Subject] = [
    _subject("eng", "English Language", "Core", "bg-blue-200 border-blue-400"),
    _subject("mat", "Mathematics", "Core", "bg-green-200 border-green-400"),
    _subject("sci", "Science", "Core", "bg-emerald-200 border-emerald-400"),
    _subject("his", "History", "Core", "bg-amber-200 border-amber-400"),
    _subject("rme", "RME", "Elective", "bg-indigo-200 border-indigo-400"),
    _subject("gha", "Ghanaian Lang", "Elective", "bg-orange-200 border-orange-400"),
    _subject("ict", "ICT", "Elective", "bg-slate-200 border-slate-400"),
    _subject("art", "Creative Arts", "Elective", "bg-purple-200 border-purple-400"),
]

SUBJECTS_BY_DEPT: dict[Department, list[Subject]] = {
    Department.CRECHE: [
        *_EARLY_YEARS_CORE,
        _subject("art", "Creative Arts", "Elective", "bg-purple-100 border-purple-300"),
        _subject("mus", "Music & Movement", "Activity", "bg-pink-100 border-pink-300"),
        _subject("phy", "Physical Dev", "Activity", "bg-orange-100 border-orange-300"),
        _subject("soc", "Social & Emotional", "Activity", "bg-indigo-100 border-indigo-300"),
        _subject("mor", "Moral Education", "Activity", "bg-teal-100 border-teal-300"),
    ],
    Department.NURSERY: [
        *_EARLY_YEARS_CORE,
        _subject("art", "Creative Arts", "Elective", "bg-purple-100 border-purple-300"),
        _subject("mus", "Music & Movement", "Activity", "bg-pink-100 border-pink-300"),
        _subject("phy", "Physical Dev", "Activity", "bg-orange-100 border-orange-300"),
    ],
    Department.KG: [
        *_EARLY_YEARS_CORE,
        _subject("owop", "Our World Our People", "Core", "bg-red-100 border-red-300"),
        _subject("ict", "ICT Basic", "Elective", "bg-slate-100 border-slate-300"),
        _subject("art", "Creative Arts", "Elective", "bg-purple-100 border-purple-300"),
    ],
    Department.LOWER_BASIC: list(_BASIC_SUBJECTS),
    Department.UPPER_BASIC: list(_BASIC_SUBJECTS),
    Department.JHS: [
        _subject("eng", "English Language", "Core", "bg-blue-300 border-blue-500"),
        _subject("mat", "Mathematics", "Core", "bg-green-300 border-green-500"),
        _subject("sci", "Integrated Science", "Core", "bg-emerald-300 border-emerald-500"),
        _subject("soc", "Social Studies", "Core", "bg-amber-300 border-amber-500"),
        _subject("rme", "RME", "Core", "bg-indigo-300 border-indigo-500"),
        _subject("com", "Computing", "Core", "bg-slate-300 border-slate-500"),
        _subject("bdt", "BDT", "Elective", "bg-violet-300 border-violet-500"),
        _subject("fre", "French", "Elective", "bg-cyan-300 border-cyan-500"),
        _subject("art", "Visual Arts", "Elective", "bg-purple-300 border-purple-500"),
    ],
}

CUSTOMARY_ACTIVITIES: list[Subject] = [
    _subject("worship", "Worship", "Activity", "bg-yellow-400 border-yellow-600 font-bold"),
    _subject("extra", "Extra-Curricular", "Activity", "bg-sky-200 border-sky-400"),
    _subject("library", "Library", "Activity", "bg-lime-200 border-lime-400"),
    _subject("club", "Club Activity", "Activity", "bg-rose-200 border-rose-400"),
    _subject("hymns", "Singing & Hymns", "Activity", "bg-indigo-400 text-white border-indigo-600"),
    _subject("plc", "PLC Meeting", "Activity", "bg-black text-white border-gray-800"),
]

# Order matters: the first entry is the filler for departments without subjects.
BREAK_SUBJECTS: list[Subject] = [
    _subject("snack", "Snack Break", "Break", "bg-gray-100 border-gray-200 italic"),
    _subject("lunch", "Lunch Break", "Break", "bg-gray-200 border-gray-300 italic"),
    _subject("assembly", "Assembly", "Activity", "bg-slate-400 text-white border-slate-600"),
]


def break_subject(subject_id: str) -> Subject:
    return next(subject for subject in BREAK_SUBJECTS if subject.id == subject_id)


def make_class_key(level: str, stream: str) -> str:
    return level if stream == STREAM_NONE else f"{level}-{stream}"
