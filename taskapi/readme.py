STUDENT_ID = "500225970"
GITHUB_REPO_URL = "https://github.com/ameyster1999/gocrud"
DOCKER_REPO = "ameyster786/gocrud:latest"

API_GUIDE_MESSAGE = """
This is a simple taskmanager app
Rest Endpoint :
- To view all tasks, use /tasks.
- To create a new task, Hit POST request to /tasks with a JSON body
     {{"title": "Task 1", "status": "completed"}}
- To update a task, send a PUT request to /task/{{id}}
     {{"title": "Task 1", "status": "completed"}} fields to update
- To delete a task, send a DELETE request to /task/{{id}}.

The more documentation at: {repo}

Student ID: {student_id}
GitHub Repository: {repo}
dockerRepo: {docker}
"""


def render_readme() -> str:
    return API_GUIDE_MESSAGE.format(
        student_id=STUDENT_ID,
        repo=GITHUB_REPO_URL,
        docker=DOCKER_REPO,
    )
