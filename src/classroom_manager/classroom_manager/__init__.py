"""Classroom Manager package.

Feature modules (classes, students, attendance, tuition, schedules, alerts, ...)
sit behind a thin Flask controller layer with service/repository layers below.
The schedule/agenda/alert core is pure and never touches the database.
"""
