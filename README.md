# coursehub

An interactive, terminal-based course management system. The administrator
creates teachers and students; teachers create courses, enrol students, set
assignments and grade homework; students enrol with a course password,
submit homework and view their grades. Every logged-in user can send and read
messages.

The package has no dependencies beyond the Python standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

## Running

```
coursehub
```

By default the data files are kept in the current working directory. To keep
them somewhere else:

```
coursehub --data-dir path/to/data
```

The directory is created if it does not exist. The program greets you and
waits for commands, one per line. Type `help` to list them and `exit` to
quit; the program also stops at the end of its input. Each command then asks
for the values it needs. A prompt for a number is repeated until a valid
number is entered, and a prompt for text until a non-empty line is entered.
Unknown commands are ignored.

To get started, `login` as the administrator, whose id is `0` and whose
password is `ADMIN_PASSWORD` in `coursehub/config.py`, then use `add_user`
to create teachers and students. New ids are handed out from 100 upwards,
separately for users, courses, assignments, homework and messages, and are
printed when an item is created.

## Commands

| Command            | Who may use it       | What it does                                   |
|--------------------|----------------------|------------------------------------------------|
| `login`            | anyone logged out    | log in with an id and a password               |
| `logout`           | anyone               | log out                                        |
| `add_user`         | administrator        | add a student or a teacher                     |
| `delete_user`      | administrator        | delete a user by id                            |
| `add_course`       | teacher              | create a course protected by a password        |
| `enroll`           | teacher or student   | teachers add a student to their own course; students join with the course password |
| `assign_homework`  | teacher              | add an assignment to one of your courses       |
| `submit_homework`  | enrolled student     | submit an answer to an assignment              |
| `view_homeworks`   | course owner         | list submissions for an assignment             |
| `grade_homework`   | course owner         | grade a submission from 2 to 6, truncated to two decimals |
| `view_grades`      | student              | list your submissions and grades               |
| `message`          | any logged-in user   | send a message to another user                 |
| `message_all`      | administrator        | message every other user                       |
| `message_students` | course owner         | message every student enrolled in the course   |
| `mailbox`          | any logged-in user   | read your messages with the time they were sent |
| `clear_mailbox`    | any logged-in user   | delete your messages                           |
| `change_password`  | teacher or student   | change your password                           |
| `help`             | anyone               | list the commands                              |
| `exit`             | anyone               | quit                                           |

Errors, such as a missing permission or an unknown id, are printed and the
program carries on with the next command.

## Data files

All data is kept in binary files in the data directory: `users.dat`,
`ids.dat`, `homeworks.dat`, `courses.dat`, `assignments.dat` and
`messages.dat`. `temp.dat` is used briefly while a file is rewritten. The
files are created when first needed, and the administrator account is added
to `users.dat` whenever it is missing. `coursehub.config.DataFiles` gives the
path of each file for a chosen directory.

## Using it from Python

`coursehub.system.System` offers the same operations as methods, and
`coursehub.cli.CommandHandler` drives them from text input.

```python
from coursehub.config import ADMIN_ID, ADMIN_PASSWORD, DataFiles
from coursehub.models import UserType
from coursehub.system import System

password = "password"

with System(DataFiles("data")) as system:
    system.login(ADMIN_ID, ADMIN_PASSWORD)
    teacher_id = system.add_user(UserType.TEACHER, "Ada", "Teacher", password)
    student_id = system.add_user(UserType.STUDENT, "Sam", "Student", password)
    system.logout()

    system.login(teacher_id, password)
    course_id = system.add_course("Algebra", password)
    system.enroll_student(student_id, course_id)
    assignment_id = system.add_assignment(course_id, "Exercises")
    system.logout()

    system.login(student_id, password)
    submission_id = system.add_homework(assignment_id, "x = 2")
    system.logout()

    system.login(teacher_id, password)
    system.grade_submission(submission_id, 5.5)
    print(system.submissions_report(assignment_id))
```

Other methods are `delete_user`, `change_password`, `enrolls_with_password`,
`enroll_self`, `grades_report`, `message_user`, `message_all`,
`message_course`, `mailbox` and `clear_mailbox`. Reports and the mailbox are
returned as text. Failed checks raise `coursehub.access.AccessDenied` (a
`PermissionError`); unknown ids raise `LookupError`; invalid values raise
`ValueError`.

The stores in `coursehub.users`, `coursehub.courses`,
`coursehub.assignments`, `coursehub.submissions` and `coursehub.messages`
can also be used on their own, and `coursehub.binfile` holds the record
format they share.

## Limitations

- Passwords are not securely hashed: they are stored reversed.
- The data files have no locking; only one program should use a data
  directory at a time.

## Tests

```
pip install .[test]
pytest
```