"""GraphQL query and mutation constants for the GitHub provider."""

FETCH_REPOSITORY_OWNER = """
query($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    id
    owner { id login }
  }
}
"""

CREATE_PROJECT = """
mutation($ownerId: ID!, $title: String!, $repositoryId: ID) {
  createProjectV2(input: {ownerId: $ownerId, title: $title, repositoryId: $repositoryId}) {
    projectV2 { id number title shortDescription url }
  }
}
"""

UPDATE_PROJECT_DESCRIPTION = """
mutation($projectId: ID!, $shortDescription: String!) {
  updateProjectV2(input: {projectId: $projectId, shortDescription: $shortDescription}) {
    projectV2 { id number title shortDescription url }
  }
}
"""

LIST_REPOSITORY_PROJECTS = """
query($owner: String!, $name: String!, $after: String) {
  repository(owner: $owner, name: $name) {
    projectsV2(first: 100, after: $after) {
      nodes { id number title shortDescription url }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

ADD_PROJECT_ITEM = """
mutation($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
    item { id }
  }
}
"""
