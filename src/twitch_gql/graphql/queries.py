"""GraphQL query documents for the Twitch endpoint."""

USER_FIELDS = """
fragment UserFields on User {
  id
  login
  displayName
  description
  profileImageURL(width: 300)
  createdAt
}
"""

CHANNEL_FIELDS = """
fragment ChannelFields on User {
  id
  name: login
  displayName
  description
  profileImageURL(width: 300)
}
"""

GAME_FIELDS = """
fragment GameFields on Game {
  id
  name
  displayName
  viewersCount
  followersCount
  boxArtURL
}
"""

USERNAME_AVAILABILITY = """
query($username: String!) {
  isUsernameAvailable(username: $username)
}
"""

CURRENT_USER = (
    """
query {
  currentUser { ...UserFields }
}
"""
    + USER_FIELDS
)

USERS_BY_ID = (
    """
query($ids: [ID!]) {
  users(ids: $ids) { ...UserFields }
}
"""
    + USER_FIELDS
)

USERS_BY_LOGIN = (
    """
query($logins: [String!]) {
  users(logins: $logins) { ...UserFields }
}
"""
    + USER_FIELDS
)

CHANNELS_BY_ID = (
    """
query($ids: [ID!]) {
  users(ids: $ids) { ...ChannelFields }
}
"""
    + CHANNEL_FIELDS
)

CHANNELS_BY_NAME = (
    """
query($names: [String!]) {
  users(logins: $names) { ...ChannelFields }
}
"""
    + CHANNEL_FIELDS
)

STREAMS = (
    """
query($first: Int, $after: Cursor, $options: StreamOptions) {
  streams(first: $first, after: $after, options: $options) {
    edges {
      cursor
      node {
        id title type viewersCount createdAt
        broadcaster { ...UserFields }
        game { ...GameFields }
      }
    }
    pageInfo { hasNextPage }
  }
}
"""
    + USER_FIELDS
    + GAME_FIELDS
)

VIDEO_CONNECTION = """
edges {
  cursor
  node {
    id title description lengthSeconds viewCount broadcastType createdAt publishedAt
    owner { ...UserFields }
    game { ...GameFields }
  }
}
pageInfo { hasNextPage }
"""

VIDEOS = (
    """
query($first: Int, $after: Cursor) {
  videos(first: $first, after: $after) {"""
    + VIDEO_CONNECTION
    + """}
}
"""
    + USER_FIELDS
    + GAME_FIELDS
)

USER_VIDEOS = (
    """
query($id: ID!, $first: Int, $after: Cursor) {
  user(id: $id) {
    videos(first: $first, after: $after) {"""
    + VIDEO_CONNECTION
    + """}
  }
}
"""
    + USER_FIELDS
    + GAME_FIELDS
)

GAMES = (
    """
query($first: Int, $after: Cursor, $options: GameOptions) {
  games(first: $first, after: $after, options: $options) {
    edges { cursor node { ...GameFields } }
    pageInfo { hasNextPage }
  }
}
"""
    + GAME_FIELDS
)

CLIP_BY_SLUG = (
    """
query($slug: ID!) {
  clip(slug: $slug) {
    id slug title url viewCount durationSeconds createdAt
    broadcaster { ...UserFields }
    curator { ...UserFields }
    game { ...GameFields }
  }
}
"""
    + USER_FIELDS
    + GAME_FIELDS
)

FOLLOWERS = (
    """
query($id: ID!, $first: Int, $after: Cursor) {
  user(id: $id) {
    followers(first: $first, after: $after) {
      totalCount
      edges { cursor followedAt node { ...UserFields } }
      pageInfo { hasNextPage }
    }
  }
}
"""
    + USER_FIELDS
)

MODS = (
    """
query($id: ID!, $first: Int, $after: Cursor) {
  user(id: $id) {
    mods(first: $first, after: $after) {
      edges { cursor grantedAt node { ...UserFields } }
      pageInfo { hasNextPage }
    }
  }
}
"""
    + USER_FIELDS
)

VIPS = (
    """
query($id: ID!, $first: Int, $after: Cursor) {
  user(id: $id) {
    vips(first: $first, after: $after) {
      edges { cursor grantedAt node { ...UserFields } }
      pageInfo { hasNextPage }
    }
  }
}
"""
    + USER_FIELDS
)
